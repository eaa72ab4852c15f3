"""
Geometry and random helpers for the arena simulation
"""

from __future__ import annotations
import math
from typing import Tuple

import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def normalize(x: float, y: float) -> Tuple[float, float]:
    """Normalize a vector to unit length; the zero vector stays zero"""
    l = math.hypot(x, y)
    if l == 0:
        return 0.0, 0.0
    return x / l, y / l


def distance_sq(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared euclidean distance between two points"""
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles touch or overlap"""
    rr = r1 + r2
    return distance_sq(x1, y1, x2, y2) <= rr * rr


def rand_range(rng: np.random.Generator, lo: float, hi: float) -> float:
    """Uniform draw in [lo, hi)"""
    return lo + float(rng.random()) * (hi - lo)


def make_rng(seed=None) -> np.random.Generator:
    """Build a generator from a seed, or pass an existing generator through"""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)
