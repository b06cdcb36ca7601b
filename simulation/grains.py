# simulation/grains.py
"""Saltating sand grains.

Runs every frame with the frame delta (not sub-stepped). Grains are launched
either from dune sources or by wind tracers, fly ballistically under gravity,
and add GRAIN_SIZE of sand where they hit the ground. Grains that expire in
the air or leave the expanded bounds vanish without depositing.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from simulation.config import (
    BOUNDS_MARGIN,
    GRAINS_PER_FRAME,
    GRAIN_JITTER,
    GRAIN_LIFE,
    GRAIN_LIFT,
    GRAIN_SIZE,
    GRAIN_SPEED_FACTOR,
    GRAIN_SPREAD,
    GRAVITY,
)
from simulation.particles import Particle
from world.brush import paint

if TYPE_CHECKING:
    from game_state.state import SimulationState


def launch_grain(state: "SimulationState", grain: Particle, x: float, y: float, z: float) -> None:
    """Place a grain and give it a ballistic launch velocity.

    Heading is the wind direction rotated by up to +-GRAIN_SPREAD, speed
    follows the wind, plus an upward lift and small horizontal jitter.
    """
    rng = state.rng
    heading = state.wind.direction + rng.uniform(-GRAIN_SPREAD, GRAIN_SPREAD)
    speed = state.wind.speed * GRAIN_SPEED_FACTOR
    vx = math.cos(heading) * speed + rng.uniform(-GRAIN_JITTER, GRAIN_JITTER)
    vz = math.sin(heading) * speed + rng.uniform(-GRAIN_JITTER, GRAIN_JITTER)
    vy = GRAIN_LIFT * rng.uniform(0.5, 1.0)
    grain.place(x, y, z)
    grain.launch(vx, vy, vz, GRAIN_LIFE)


def entrain_grain(state: "SimulationState", x: float, y: float, z: float) -> Optional[Particle]:
    """Launch one grain from (x, y, z). Returns None if the pool is full."""
    grain = state.grains.acquire()
    if grain is None:
        return None
    launch_grain(state, grain, x, y, z)
    return grain


def spawn_dune_grains(state: "SimulationState", count: int = GRAINS_PER_FRAME) -> int:
    """Blow up to `count` grains off random dune sources.

    Returns:
        Number of grains actually spawned.
    """
    sources = state.dune_sources
    if not sources:
        return 0

    rng = state.rng
    field = state.heightfield
    spawned = 0
    for _ in range(min(count, state.config.sand_amount)):
        grain = state.grains.acquire()
        if grain is None:
            break
        dune = sources[int(rng.integers(len(sources)))]
        x, z = dune.random_surface_point(rng)
        y = field.query(x, z) + dune.lift
        launch_grain(state, grain, x, y, z)
        spawned += 1
    return spawned


def step_grain(state: "SimulationState", grain: Particle, dt: float) -> bool:
    """Advance one grain by dt and resolve contact/expiry.

    Returns:
        True if the grain deposited sand this step.
    """
    field = state.heightfield
    grain.integrate(dt)
    grain.vy -= GRAVITY * dt
    grain.life -= dt

    if grain.y <= field.query(grain.x, grain.z):
        paint(field, grain.x, grain.z, GRAIN_SIZE)
        state.grains.release(grain)
        return True

    if not state.in_particle_bounds(grain.x, grain.z, BOUNDS_MARGIN) or grain.life <= 0:
        state.grains.release(grain)
    return False


def simulate_grains(state: "SimulationState", dt: float) -> int:
    """Run one frame of the grain system.

    Returns:
        Number of grains that deposited this frame.
    """
    spawn_dune_grains(state)

    deposits = 0
    for grain in state.grains.active():
        if step_grain(state, grain, dt):
            deposits += 1
    return deposits
