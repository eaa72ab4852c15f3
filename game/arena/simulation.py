"""
Arena simulation - per-frame survival step
------------------------------------------
- A player moves inside a bounded arena from a normalized movement intent
- Projectiles spawn on the arena edges and fly straight at where the player
  was standing when they spawned
- Contact costs exactly one hp and removes the projectile
- The session is over once hp reaches 0; further steps are no-ops

The step consumes a delta time that the caller has already clamped (see
FrameClock). Collisions are discrete end-of-step distance checks, so a
projectile moving more than its combined diameter in one step can pass
through the player undetected; bounding dt keeps that window small.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from .entities import Player, Projectile
from .pool import ProjectilePool
from .spawner import Spawner
from .utils import clamp, circle_collide, make_rng, normalize

MAX_DT = 0.05  # seconds, upper bound a driver should apply per frame
FLASH_DURATION = 0.15
SHAKE_DURATION = 0.2


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    radius: float
    hp: int
    max_hp: int


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class WorldSnapshot:
    """
    Read-only picture of the simulation for presentation.

    Only the current flash intensity is kept; callers that blend against the
    previous frame hold on to the previous snapshot.

    :ivar flash (float): hit-flash intensity in [0, 1].
    :ivar shake (float): screen-shake intensity in [0, 1].
    """

    width: float
    height: float
    player: PlayerView
    projectiles: Tuple[ProjectileView, ...]
    survived: float
    flash: float
    shake: float
    game_over: bool

    @property
    def projectile_count(self) -> int:
        return len(self.projectiles)


class Simulation:
    """Owns all entity and session state of one play-through"""

    def __init__(
        self,
        rng=None,
        width: float = 3000.0,
        height: float = 3000.0,
        player_radius: float = 16.0,
        player_speed: float = 240.0,
        max_hp: int = 500,
        projectile_radius: float = 8.0,
        projectile_ttl: float = 6.0,
        projectile_speed_range: Tuple[float, float] = (220.0, 320.0),
        spawn_interval_range: Tuple[float, float] = (0.4, 1.2),
        max_projectiles: Optional[int] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"arena size must be positive, got {width}x{height}")
        if player_radius <= 0 or projectile_radius <= 0:
            raise ValueError("radii must be positive")
        if 2 * player_radius > min(width, height):
            raise ValueError("player does not fit in the arena")
        if player_speed <= 0:
            raise ValueError(f"player speed must be positive, got {player_speed}")
        if projectile_ttl <= 0:
            raise ValueError(f"projectile_ttl must be positive, got {projectile_ttl}")
        if max_hp <= 0:
            raise ValueError(f"max_hp must be positive, got {max_hp}")

        self.rng: np.random.Generator = make_rng(rng)
        self.width = width
        self.height = height

        self.player = Player(
            x=width * 0.5,
            y=height * 0.5,
            radius=player_radius,
            speed=player_speed,
            hp=max_hp,
            max_hp=max_hp,
        )
        self.projectiles = ProjectilePool(capacity=max_projectiles)
        self.spawner = Spawner(
            self.rng,
            width,
            height,
            interval_range=spawn_interval_range,
            speed_range=projectile_speed_range,
            projectile_radius=projectile_radius,
            projectile_ttl=projectile_ttl,
        )

        # Session state
        self.survived = 0.0
        self.flash_timer = 0.0
        self.shake_timer = 0.0
        self.game_over = False

    # ----------------------------
    # Step
    # ----------------------------

    def step(self, dt: float, intent: Tuple[float, float] = (0.0, 0.0)) -> Dict[str, float]:
        """
        Advance the session by dt seconds.

        Negative dt is treated as 0. Returns the events of this step:
        hits taken, projectiles spawned and projectiles expired.
        """
        events = {"hits": 0, "spawned": 0, "expired": 0}
        if self.game_over:
            return events

        dt = max(0.0, dt)

        self._move_player(dt, intent)

        projectile = self.spawner.update(dt, self.player.x, self.player.y)
        if projectile is not None:
            self.projectiles.add(projectile)
            events["spawned"] += 1

        self._update_projectiles(dt, events)

        self.survived += dt
        self.flash_timer = max(0.0, self.flash_timer - dt)
        self.shake_timer = max(0.0, self.shake_timer - dt)
        return events

    def _move_player(self, dt: float, intent: Tuple[float, float]):
        p = self.player

        # Overwrite velocity every step; no inertia
        nx, ny = normalize(float(intent[0]), float(intent[1]))
        p.vx = nx * p.speed
        p.vy = ny * p.speed

        p.x += p.vx * dt
        p.y += p.vy * dt

        r = p.radius
        p.x = clamp(p.x, r, self.width - r)
        p.y = clamp(p.y, r, self.height - r)

    def _update_projectiles(self, dt: float, events: Dict[str, float]):
        p = self.player

        for handle, proj in self.projectiles.items():
            proj.x += proj.dx * proj.speed * dt
            proj.y += proj.dy * proj.speed * dt
            proj.ttl -= dt

            if proj.ttl <= 0:
                self.projectiles.remove(handle)
                events["expired"] += 1
                continue

            if circle_collide(p.x, p.y, p.radius, proj.x, proj.y, proj.radius):
                self.projectiles.remove(handle)
                if self._hit():
                    events["hits"] += 1

    def _hit(self) -> bool:
        # hp never drops below 0 even if several projectiles land on the last step
        damaged = self.player.hp > 0
        if damaged:
            self.player.hp -= 1
        self.flash_timer = FLASH_DURATION
        self.shake_timer = SHAKE_DURATION
        if self.player.hp <= 0:
            self.game_over = True
        return damaged

    # ----------------------------
    # Reads
    # ----------------------------

    def add_projectile(self, projectile: Projectile) -> int:
        """Insert a projectile directly, bypassing the spawner"""
        return self.projectiles.add(projectile)

    @property
    def flash(self) -> float:
        return self.flash_timer / FLASH_DURATION

    @property
    def shake(self) -> float:
        return self.shake_timer / SHAKE_DURATION

    def snapshot(self) -> WorldSnapshot:
        p = self.player
        return WorldSnapshot(
            width=self.width,
            height=self.height,
            player=PlayerView(p.x, p.y, p.radius, p.hp, p.max_hp),
            projectiles=tuple(
                ProjectileView(b.x, b.y, b.radius) for b in self.projectiles
            ),
            survived=self.survived,
            flash=self.flash,
            shake=self.shake,
            game_over=self.game_over,
        )
