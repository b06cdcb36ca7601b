"""Simulation state initialization and dune field reseeding."""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from config import SimulationConfig, SMOOTHING_PASSES, TRACER_INTERVAL
from game_state.state import SimulationState
from simulation.config import TRACER_COUNT
from simulation.particles import Particle, ParticlePool
from world.clock import SimulationClock
from world.generation import generate_dune_field
from world.wind import WindState

LOGGER = logging.getLogger(__name__)


def build_initial_state(
    config: Optional[SimulationConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> SimulationState:
    """Create a new, idle simulation state with a freshly seeded dune field.

    Args:
        config: Construction parameters (defaults from config.py).
        rng: Random generator; one is created from config.seed if omitted.
    """
    config = config or SimulationConfig()
    if rng is None:
        rng = np.random.default_rng(config.seed)

    heightfield, dune_sources = generate_dune_field(config, rng, SMOOTHING_PASSES)

    state = SimulationState(
        config=config,
        heightfield=heightfield,
        wind=WindState(direction=config.wind_direction, speed=config.wind_speed),
        tracers=ParticlePool(TRACER_COUNT, Particle),
        grains=ParticlePool(config.sand_amount, Particle),
        rng=rng,
        clock=SimulationClock(step_interval=TRACER_INTERVAL),
        dune_sources=dune_sources,
    )
    LOGGER.debug(
        "Built %dx%d dune field with %d dunes, elevation %.2f..%.2f",
        config.resolution + 1, config.resolution + 1,
        len(dune_sources), *heightfield.elevation_range(),
    )
    return state


def reseed_state(state: SimulationState) -> None:
    """Clear both pools, regenerate the terrain and rewind the clocks.

    The wind is left as the user set it; the run flag is handled by the driver.
    """
    state.tracers.clear()
    state.grains.clear()
    state.heightfield, state.dune_sources = generate_dune_field(
        state.config, state.rng, SMOOTHING_PASSES
    )
    state.clock.reset()
    LOGGER.debug("Reseeded dune field with %d dunes", len(state.dune_sources))
