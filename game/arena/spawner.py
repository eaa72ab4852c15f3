"""
Projectile spawner - randomized cadence from the arena edges
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .entities import Projectile
from .utils import normalize, rand_range

# Edge indices, drawn uniformly
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3


class Spawner:
    """
    Emits one projectile each time the elapsed-time accumulator reaches the
    current target interval, then draws a fresh interval.
    """

    def __init__(
        self,
        rng: np.random.Generator,
        width: float,
        height: float,
        interval_range: Tuple[float, float] = (0.4, 1.2),
        speed_range: Tuple[float, float] = (220.0, 320.0),
        projectile_radius: float = 8.0,
        projectile_ttl: float = 6.0,
    ):
        if interval_range[0] > interval_range[1]:
            raise ValueError(f"inverted interval range {interval_range}")
        if speed_range[0] > speed_range[1]:
            raise ValueError(f"inverted speed range {speed_range}")
        if speed_range[0] < 0:
            raise ValueError(f"projectile speed must be non-negative, got {speed_range}")
        if projectile_ttl <= 0:
            raise ValueError(f"projectile_ttl must be positive, got {projectile_ttl}")

        self.rng = rng
        self.width = width
        self.height = height
        self.interval_range = interval_range
        self.speed_range = speed_range
        self.projectile_radius = projectile_radius
        self.projectile_ttl = projectile_ttl

        self.elapsed = 0.0
        self.interval = rand_range(self.rng, *self.interval_range)

    def update(self, dt: float, target_x: float, target_y: float) -> Optional[Projectile]:
        """Advance the accumulator; returns the new projectile when one is due"""
        self.elapsed += dt
        if self.elapsed < self.interval:
            return None

        self.elapsed = 0.0
        self.interval = rand_range(self.rng, *self.interval_range)
        return self.spawn(target_x, target_y)

    def spawn_point(self) -> Tuple[float, float]:
        edge = int(self.rng.integers(4))
        if edge == TOP:
            return rand_range(self.rng, 0, self.width), 0.0
        if edge == RIGHT:
            return float(self.width), rand_range(self.rng, 0, self.height)
        if edge == BOTTOM:
            return rand_range(self.rng, 0, self.width), float(self.height)
        return 0.0, rand_range(self.rng, 0, self.height)

    def spawn(self, target_x: float, target_y: float) -> Projectile:
        """Build a projectile on a random edge aimed at the target"""
        x, y = self.spawn_point()
        dx, dy = normalize(target_x - x, target_y - y)
        return Projectile(
            x=x,
            y=y,
            dx=dx,
            dy=dy,
            speed=rand_range(self.rng, *self.speed_range),
            radius=self.projectile_radius,
            ttl=self.projectile_ttl,
        )
