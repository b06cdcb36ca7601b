# simulation/particles.py
"""Fixed-capacity particle pools.

Both wind tracers and sand grains live in pools of reusable slots. A pool
never grows: acquire() hands out the lowest-indexed inactive slot (first-fit)
or None when every slot is busy, and release() only flips the slot inactive.
Stale contents stay in a released slot until the next acquire overwrites them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

import numpy as np


@dataclass
class Particle:
    """Shared shape for tracers and grains."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    life: float = 0.0
    active: bool = False

    def place(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = x, y, z

    def launch(self, vx: float, vy: float, vz: float, life: float) -> None:
        self.vx, self.vy, self.vz = vx, vy, vz
        self.life = life

    def integrate(self, dt: float) -> None:
        """Move by velocity * dt."""
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.z += self.vz * dt


T = TypeVar("T", bound=Particle)


class ParticlePool(Generic[T]):
    """Fixed array of particle slots with first-fit reuse."""

    def __init__(self, capacity: int, factory: Callable[[], T]) -> None:
        self._slots: List[T] = [factory() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def active_count(self) -> int:
        return sum(1 for slot in self._slots if slot.active)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> T:
        return self._slots[index]

    def acquire(self) -> Optional[T]:
        """Activate and return the first inactive slot, or None if the pool is full."""
        for slot in self._slots:
            if not slot.active:
                slot.active = True
                return slot
        return None

    def release(self, slot: T) -> None:
        slot.active = False

    def clear(self) -> None:
        """Mark every slot inactive."""
        for slot in self._slots:
            slot.active = False

    def active(self) -> Iterator[T]:
        """Active slots in index order."""
        return (slot for slot in self._slots if slot.active)

    def index_of(self, slot: T) -> int:
        """Slot index by identity."""
        for i, candidate in enumerate(self._slots):
            if candidate is slot:
                return i
        raise ValueError("particle does not belong to this pool")

    def positions(self) -> np.ndarray:
        """(n, 3) array of active particle positions for instanced drawing."""
        coords = [(p.x, p.y, p.z) for p in self._slots if p.active]
        if not coords:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array(coords, dtype=np.float64)
