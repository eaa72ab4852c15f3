"""
Tests for input state and frame clock.
"""
import math

import pytest

from game.arena.controls import FrameClock, InputState


class TestInputState:
    """Tests for held-direction input."""

    def test_idle(self):
        state = InputState()
        assert state.axes() == (0, 0)
        assert state.intent() == (0.0, 0.0)

    def test_single_direction(self):
        state = InputState()
        state.press("up")
        assert state.axes() == (0, -1)
        assert state.intent() == (0.0, -1.0)

    def test_diagonal_normalized(self):
        state = InputState()
        state.press("down")
        state.press("right")
        x, y = state.intent()
        assert math.hypot(x, y) == pytest.approx(1.0)
        assert x > 0 and y > 0

    def test_opposites_cancel(self):
        state = InputState()
        state.press("left")
        state.press("right")
        assert state.axes() == (0, 0)

    def test_release(self):
        state = InputState()
        state.press("left")
        state.release("left")
        assert state.axes() == (0, 0)

    def test_repeat_ignored(self):
        """Key-repeat events do not re-press a released key."""
        state = InputState()
        state.press("up")
        state.release("up")
        state.press("up", repeat=True)
        assert not state.up

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            InputState().press("jump")


class TestFrameClock:
    """Tests for the frame timing driver."""

    def test_first_tick_is_zero(self):
        clock = FrameClock()
        assert clock.tick(12.5) == 0.0

    def test_regular_frame(self):
        clock = FrameClock(start=1.0)
        assert clock.tick(1.016) == pytest.approx(0.016)

    def test_hitch_is_clamped(self):
        clock = FrameClock(start=0.0)
        assert clock.tick(2.0) == 0.05

    def test_backwards_time_is_zero(self):
        clock = FrameClock(start=5.0)
        assert clock.tick(4.0) == 0.0

    def test_fps_estimate(self):
        clock = FrameClock(start=0.0)
        for i in range(1, 121):
            clock.tick(i * 0.01)
        assert clock.fps == pytest.approx(100.0, rel=1e-3)

    def test_invalid_max_dt(self):
        with pytest.raises(ValueError):
            FrameClock(max_dt=0)
