"""
Handle-addressed projectile container

Projectiles are stored under monotonically increasing integer handles in
insertion order. Iteration walks a snapshot of the live entries, so the
simulation can remove projectiles while it is looping over them.

An optional soft capacity bounds the per-step cost of long sessions: adding
to a full pool evicts the oldest live projectile first.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from .entities import Projectile


class ProjectilePool:
    """Live projectile set keyed by handle"""

    def __init__(self, capacity: Optional[int] = None):
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.evicted = 0
        self._live: Dict[int, Projectile] = {}
        self._next_handle = 0

    def __len__(self) -> int:
        return len(self._live)

    def __contains__(self, handle: int) -> bool:
        return handle in self._live

    def __iter__(self) -> Iterator[Projectile]:
        return iter(list(self._live.values()))

    def items(self) -> List[Tuple[int, Projectile]]:
        """Snapshot of live (handle, projectile) pairs, oldest first"""
        return list(self._live.items())

    def add(self, projectile: Projectile) -> int:
        if self.capacity is not None and len(self._live) >= self.capacity:
            oldest = next(iter(self._live))
            del self._live[oldest]
            self.evicted += 1

        handle = self._next_handle
        self._next_handle += 1
        self._live[handle] = projectile
        return handle

    def get(self, handle: int) -> Optional[Projectile]:
        return self._live.get(handle)

    def remove(self, handle: int) -> Projectile:
        """Remove a live projectile; unknown handles raise KeyError"""
        return self._live.pop(handle)

    def discard(self, handle: int) -> None:
        self._live.pop(handle, None)

    def clear(self):
        self._live.clear()
