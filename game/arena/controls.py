"""
Input and timing collaborators for driving the simulation from a frame loop
"""

from __future__ import annotations

from typing import Optional, Tuple

from .simulation import MAX_DT
from .utils import clamp, normalize

DIRECTIONS = ("up", "down", "left", "right")


class InputState:
    """
    Held-direction state built from key press/release edges.

    Key-repeat presses are ignored so only the first press of a held key
    changes the state.
    """

    def __init__(self):
        self.up = False
        self.down = False
        self.left = False
        self.right = False

    def _set(self, direction: str, pressed: bool):
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction}")
        setattr(self, direction, pressed)

    def press(self, direction: str, repeat: bool = False):
        if repeat:
            return
        self._set(direction, True)

    def release(self, direction: str):
        self._set(direction, False)

    def axes(self) -> Tuple[int, int]:
        """Raw signed axes; +y points down"""
        return (
            int(self.right) - int(self.left),
            int(self.down) - int(self.up),
        )

    def intent(self) -> Tuple[float, float]:
        """Unit-length (or zero) movement intent"""
        return normalize(*self.axes())


class FrameClock:
    """
    Turns monotonic timestamps (seconds) into clamped frame deltas and keeps a
    smoothed frames-per-second estimate.
    """

    FPS_WINDOW = 0.5

    def __init__(self, max_dt: float = MAX_DT, start: Optional[float] = None):
        if max_dt <= 0:
            raise ValueError(f"max_dt must be positive, got {max_dt}")
        self.max_dt = max_dt
        self.last = start
        self.fps = 0.0
        self._smoothed = 0.0
        self._frames = 0
        self._window = 0.0

    def tick(self, now: float) -> float:
        """Delta since the previous tick, clamped to [0, max_dt]"""
        if self.last is None:
            self.last = now
        dt = clamp(now - self.last, 0.0, self.max_dt)
        self.last = now

        self._frames += 1
        self._window += dt
        if self._window >= self.FPS_WINDOW:
            fps = self._frames / self._window
            self._window = 0.0
            self._frames = 0
            self._smoothed = fps if self._smoothed == 0 else self._smoothed * 0.85 + fps * 0.15
            self.fps = self._smoothed
        return dt
