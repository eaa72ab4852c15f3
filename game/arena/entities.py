"""
Arena entity dataclasses
"""

from dataclasses import dataclass


@dataclass
class Player:
    """Controllable entity, starts centered in the arena"""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = 16.0
    speed: float = 240.0  # px/s
    hp: int = 500
    max_hp: int = 500

    @property
    def alive(self) -> bool:
        return self.hp > 0


@dataclass
class Projectile:
    """Straight-line projectile aimed at the player when spawned"""
    x: float
    y: float
    dx: float  # unit direction, fixed at spawn
    dy: float
    speed: float = 270.0  # px/s
    radius: float = 8.0
    ttl: float = 6.0  # seconds

    @property
    def vx(self) -> float:
        return self.dx * self.speed

    @property
    def vy(self) -> float:
        return self.dy * self.speed
