"""
Tests for the projectile pool.
"""
import pytest

from game.arena.entities import Projectile
from game.arena.pool import ProjectilePool


def make_projectile(x=0.0, y=0.0):
    return Projectile(x=x, y=y, dx=1.0, dy=0.0)


class TestProjectilePool:
    """Tests for ProjectilePool."""

    def test_add_and_len(self):
        pool = ProjectilePool()
        h1 = pool.add(make_projectile())
        h2 = pool.add(make_projectile())
        assert h1 != h2
        assert len(pool) == 2
        assert h1 in pool

    def test_remove_during_iteration(self):
        """Removing entries while iterating visits every entry once."""
        pool = ProjectilePool()
        for i in range(10):
            pool.add(make_projectile(x=float(i)))

        seen = []
        for handle, proj in pool.items():
            seen.append(proj.x)
            if int(proj.x) % 2 == 0:
                pool.remove(handle)

        assert sorted(seen) == [float(i) for i in range(10)]
        assert sorted(p.x for p in pool) == [1.0, 3.0, 5.0, 7.0, 9.0]

    def test_handles_not_reused(self):
        pool = ProjectilePool()
        h = pool.add(make_projectile())
        pool.remove(h)
        assert pool.add(make_projectile()) != h

    def test_remove_unknown_raises(self):
        pool = ProjectilePool()
        with pytest.raises(KeyError):
            pool.remove(42)

    def test_discard_unknown_is_noop(self):
        pool = ProjectilePool()
        pool.discard(42)
        assert len(pool) == 0

    def test_get(self):
        pool = ProjectilePool()
        proj = make_projectile()
        h = pool.add(proj)
        assert pool.get(h) is proj
        assert pool.get(h + 1) is None

    def test_unbounded_by_default(self):
        pool = ProjectilePool()
        for _ in range(1000):
            pool.add(make_projectile())
        assert len(pool) == 1000
        assert pool.evicted == 0

    def test_capacity_evicts_oldest(self):
        """A full pool drops its oldest projectile to make room."""
        pool = ProjectilePool(capacity=3)
        handles = [pool.add(make_projectile(x=float(i))) for i in range(4)]

        assert len(pool) == 3
        assert pool.evicted == 1
        assert handles[0] not in pool
        assert [p.x for p in pool] == [1.0, 2.0, 3.0]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ProjectilePool(capacity=0)

    def test_clear(self):
        pool = ProjectilePool()
        pool.add(make_projectile())
        pool.clear()
        assert len(pool) == 0
