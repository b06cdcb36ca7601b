# world/generation.py
"""
Dune field generation for Erg.

Handles:
- DuneSeed records (position, height, scale factors)
- Stamping seeds into a height field with the terrain brush
- Initial smoothing passes
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from config import (
    SimulationConfig,
    DUNE_RADIUS,
    DUNE_SCALE_MIN,
    DUNE_SCALE_MAX,
    DUNE_LIFT_MIN,
    DUNE_LIFT_MAX,
    DUNE_STAMP_FACTOR,
    SMOOTHING_PASSES,
)
from world.brush import paint
from world.terrain import HeightField

# Dune centers stay inside this fraction of the half extents
DUNE_PLACEMENT_FRACTION = 0.8
# Seed height range as a fraction of the configured dune height
DUNE_HEIGHT_VARIATION = (0.6, 1.0)


@dataclass
class DuneSeed:
    """A dune bump: center, peak height and (x, y, z) scale factors.

    scale[0] and scale[2] stretch the footprint; scale[1] scales the
    height and doubles as the spawn lift for grains blown off this dune.
    """
    x: float
    z: float
    height: float
    scale: Tuple[float, float, float] = (1.0, 1.0, 1.0)

    @property
    def radius_x(self) -> float:
        return DUNE_RADIUS * self.scale[0]

    @property
    def radius_z(self) -> float:
        return DUNE_RADIUS * self.scale[2]

    @property
    def lift(self) -> float:
        return self.scale[1]

    def random_surface_point(self, rng: np.random.Generator) -> Tuple[float, float]:
        """Uniform random (x, z) inside the dune's elliptical footprint."""
        angle = rng.uniform(0.0, 2 * math.pi)
        r = math.sqrt(rng.uniform(0.0, 1.0))
        return (self.x + math.cos(angle) * r * self.radius_x,
                self.z + math.sin(angle) * r * self.radius_z)


def generate_dune_seeds(config: SimulationConfig, rng: np.random.Generator) -> List[DuneSeed]:
    """Scatter config.dune_count seeds over the terrain."""
    half_w = config.terrain_width / 2 * DUNE_PLACEMENT_FRACTION
    half_d = config.terrain_depth / 2 * DUNE_PLACEMENT_FRACTION
    seeds: List[DuneSeed] = []
    for _ in range(config.dune_count):
        seeds.append(DuneSeed(
            x=float(rng.uniform(-half_w, half_w)),
            z=float(rng.uniform(-half_d, half_d)),
            height=config.dune_height * float(rng.uniform(*DUNE_HEIGHT_VARIATION)),
            scale=(
                float(rng.uniform(DUNE_SCALE_MIN, DUNE_SCALE_MAX)),
                float(rng.uniform(DUNE_LIFT_MIN, DUNE_LIFT_MAX)),
                float(rng.uniform(DUNE_SCALE_MIN, DUNE_SCALE_MAX)),
            ),
        ))
    return seeds


def stamp_dune(field: HeightField, seed: DuneSeed) -> None:
    """Build one dune by painting brush stamps over its footprint.

    Each grid sample inside the elliptical footprint receives a stamp whose
    strength falls off linearly from the center. Overlapping brushes sum to
    roughly seed.height * seed.lift at the peak.
    """
    rx, rz = seed.radius_x, seed.radius_z
    gx_min, gz_min = field.world_to_grid(seed.x - rx, seed.z - rz)
    gx_max, gz_max = field.world_to_grid(seed.x + rx, seed.z + rz)
    peak = seed.height * seed.lift * DUNE_STAMP_FACTOR

    for gx in range(max(0, gx_min), min(field.resolution, gx_max) + 1):
        for gz in range(max(0, gz_min), min(field.resolution, gz_max) + 1):
            wx, wz = field.grid_to_world(gx, gz)
            r = math.sqrt(((wx - seed.x) / rx) ** 2 + ((wz - seed.z) / rz) ** 2)
            if r >= 1.0:
                continue
            paint(field, wx, wz, peak * (1.0 - r))


def generate_dune_field(
    config: SimulationConfig,
    rng: np.random.Generator,
    smoothing_passes: int = SMOOTHING_PASSES,
) -> Tuple[HeightField, List[DuneSeed]]:
    """
    Create a fresh height field with stamped and smoothed dunes.

    Returns:
        (field, seeds) - the seeds double as grain sources while running.
    """
    field = HeightField(config.terrain_width, config.terrain_depth, config.resolution)
    seeds = generate_dune_seeds(config, rng)
    for seed in seeds:
        stamp_dune(field, seed)
    for _ in range(smoothing_passes):
        field.smooth()
    return field, seeds
