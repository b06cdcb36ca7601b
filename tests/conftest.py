"""Shared fixtures: small, seeded simulation states."""
from __future__ import annotations

import numpy as np
import pytest

from config import SimulationConfig
from game_state import build_initial_state
from world.terrain import HeightField


@pytest.fixture
def small_field() -> HeightField:
    """4x4 world units, R=4: one grid cell per world unit, center cell (2, 2) at the origin."""
    return HeightField(4.0, 4.0, 4)


@pytest.fixture
def flat_config() -> SimulationConfig:
    return SimulationConfig(
        terrain_width=4.0,
        terrain_depth=4.0,
        resolution=4,
        dune_count=0,
        sand_amount=8,
        seed=7,
    )


@pytest.fixture
def flat_state(flat_config):
    """Idle state on a flat 5x5 grid with no dune sources."""
    return build_initial_state(flat_config)


@pytest.fixture
def dune_state():
    """Idle state with a few seeded dunes on a coarse grid."""
    config = SimulationConfig(resolution=16, dune_count=3, sand_amount=64, seed=42)
    return build_initial_state(config, np.random.default_rng(42))
