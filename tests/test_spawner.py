"""
Tests for the projectile spawner.
"""
import math

import numpy as np
import pytest

from game.arena.spawner import Spawner

WIDTH = HEIGHT = 3000.0


def make_spawner(seed=0, **kwargs):
    return Spawner(np.random.default_rng(seed), WIDTH, HEIGHT, **kwargs)


class TestSpawnTiming:
    """Tests for the spawn accumulator."""

    def test_initial_interval_in_band(self):
        for seed in range(50):
            assert 0.4 <= make_spawner(seed).interval < 1.2

    def test_no_spawn_before_interval(self):
        spawner = make_spawner()
        spawner.interval = 0.5

        assert spawner.update(0.3, 1500, 1500) is None
        assert spawner.elapsed == pytest.approx(0.3)

    def test_spawn_resets_accumulator(self):
        spawner = make_spawner()
        spawner.interval = 0.5

        spawner.update(0.3, 1500, 1500)
        projectile = spawner.update(0.3, 1500, 1500)

        assert projectile is not None
        assert spawner.elapsed == 0.0
        assert 0.4 <= spawner.interval < 1.2

    def test_cadence_over_run(self):
        """Spawns happen exactly when the accumulator crosses its threshold."""
        spawner = make_spawner(seed=3)
        dt = 0.1
        spawns = 0
        crossings = 0

        for _ in range(100):
            if spawner.elapsed + dt >= spawner.interval:
                crossings += 1
            if spawner.update(dt, 1500, 1500) is not None:
                spawns += 1

        assert spawns == crossings
        # 10 seconds at 0.4-1.2s per spawn (rounded up to whole steps)
        assert 8 <= spawns <= 25

    def test_same_seed_same_pattern(self):
        a, b = make_spawner(seed=9), make_spawner(seed=9)
        for _ in range(200):
            pa = a.update(0.05, 1000, 2000)
            pb = b.update(0.05, 1000, 2000)
            assert pa == pb


class TestSpawnedProjectile:
    """Tests for spawned projectile placement and trajectory."""

    def test_spawn_on_edge(self):
        spawner = make_spawner(seed=1)
        for _ in range(200):
            p = spawner.spawn(1500, 1500)
            on_vertical_edge = p.x in (0.0, WIDTH) and 0 <= p.y <= HEIGHT
            on_horizontal_edge = p.y in (0.0, HEIGHT) and 0 <= p.x <= WIDTH
            assert on_vertical_edge or on_horizontal_edge

    def test_all_edges_used(self):
        spawner = make_spawner(seed=2)
        edges = set()
        for _ in range(200):
            p = spawner.spawn(1500, 1500)
            if p.y == 0.0:
                edges.add("top")
            elif p.x == WIDTH:
                edges.add("right")
            elif p.y == HEIGHT:
                edges.add("bottom")
            elif p.x == 0.0:
                edges.add("left")
        assert edges == {"top", "right", "bottom", "left"}

    def test_aimed_at_target(self):
        spawner = make_spawner(seed=4)
        tx, ty = 700.0, 2100.0
        for _ in range(50):
            p = spawner.spawn(tx, ty)
            assert math.hypot(p.dx, p.dy) == pytest.approx(1.0)
            to_target = math.hypot(tx - p.x, ty - p.y)
            cos = (p.dx * (tx - p.x) + p.dy * (ty - p.y)) / to_target
            assert cos == pytest.approx(1.0)

    def test_speed_radius_ttl(self):
        spawner = make_spawner(seed=5)
        for _ in range(200):
            p = spawner.spawn(1500, 1500)
            assert 220 <= p.speed < 320
            assert p.radius == 8.0
            assert p.ttl == 6.0

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            make_spawner(interval_range=(1.2, 0.4))
