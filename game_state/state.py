"""Core simulation state data structures."""
from __future__ import annotations

import collections
from dataclasses import dataclass, field
from typing import Deque, List

import numpy as np

from config import SimulationConfig
from simulation.particles import Particle, ParticlePool
from world.clock import SimulationClock
from world.generation import DuneSeed
from world.terrain import HeightField
from world.wind import WindState


@dataclass
class SimulationState:
    """Main simulation state container.

    Owned by the driver (main.py); every system takes it as an explicit
    argument instead of reaching for module-level globals.
    """
    config: SimulationConfig
    heightfield: HeightField
    wind: WindState
    tracers: ParticlePool[Particle]
    grains: ParticlePool[Particle]
    rng: np.random.Generator
    clock: SimulationClock = field(default_factory=SimulationClock)

    # Dune seeds stamped at the last reset; grains are blown off these
    dune_sources: List[DuneSeed] = field(default_factory=list)

    # idle <-> running; while idle nothing advances
    running: bool = False

    messages: Deque[str] = field(default_factory=lambda: collections.deque(maxlen=100))

    # === Convenience properties ===
    @property
    def is_idle(self) -> bool:
        return not self.running

    @property
    def elapsed(self) -> float:
        return self.clock.elapsed

    def in_particle_bounds(self, x: float, z: float, margin: float) -> bool:
        """Check if (x, z) lies inside the terrain box expanded by margin."""
        return self.heightfield.contains(x, z, margin)
