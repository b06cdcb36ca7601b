# simulation/wind_tracers.py
"""Wind tracer particles.

Tracers are agents of moving air. They run on the fixed sub-step clock
(TRACER_INTERVAL), independent of frame rate:

1. Spawn a few tracers along the upwind edge of the terrain
2. Advect every tracer and count down its life
3. Every active tracer erodes the sand beneath it and entrains one grain
4. Retire tracers that expired or left the expanded bounds

Entrainment is not probabilistic: each live tracer launches a grain on
every sub-step (as long as the grain pool has room).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from config import TRACER_INTERVAL
from simulation.config import (
    BOUNDS_MARGIN,
    ENTRAINMENT_HEIGHT,
    EROSION_RATE,
    TRACERS_PER_STEP,
    TRACER_ALTITUDE,
    TRACER_LIFE,
    TRACER_NOISE,
    TRACER_UPWIND_OFFSET,
    WIND_STRENGTH,
)
from simulation.grains import entrain_grain
from simulation.particles import Particle
from utils import clamp
from world.brush import paint

if TYPE_CHECKING:
    from game_state.state import SimulationState


def spawn_tracer(state: "SimulationState") -> Optional[Particle]:
    """Place one tracer on the upwind edge of the terrain.

    The tracer starts on the box edge facing into the wind, pushed further
    upwind by a random offset and slid sideways along the perpendicular.
    The result is clamped into the expanded bounds so it is not retired
    before its first step.

    Returns:
        The tracer, or None if the pool is full.
    """
    tracer = state.tracers.acquire()
    if tracer is None:
        return None

    rng = state.rng
    field = state.heightfield
    wind = state.wind
    ux, uz = wind.unit_vector
    px, pz = wind.perpendicular
    half_w, half_d = field.half_width, field.half_depth

    # Distance from center to the box edge along the wind axis
    edge = abs(ux) * half_w + abs(uz) * half_d
    back = edge + rng.uniform(0.0, TRACER_UPWIND_OFFSET)
    # Half extent of the box across the wind axis
    span = abs(px) * half_w + abs(pz) * half_d
    lateral = rng.uniform(-span, span)

    x = clamp(-ux * back + px * lateral, -half_w - BOUNDS_MARGIN, half_w + BOUNDS_MARGIN)
    z = clamp(-uz * back + pz * lateral, -half_d - BOUNDS_MARGIN, half_d + BOUNDS_MARGIN)

    speed = wind.speed * WIND_STRENGTH
    tracer.place(x, TRACER_ALTITUDE, z)
    tracer.launch(
        ux * speed + rng.uniform(-TRACER_NOISE, TRACER_NOISE),
        rng.uniform(-TRACER_NOISE, TRACER_NOISE),
        uz * speed + rng.uniform(-TRACER_NOISE, TRACER_NOISE),
        TRACER_LIFE,
    )
    return tracer


def step_tracer(state: "SimulationState", tracer: Particle, dt: float) -> bool:
    """Advance one tracer by a sub-step.

    The tracer erodes and entrains on the step it expires too; retirement
    is checked last.

    Returns:
        True if the tracer is still alive after the step.
    """
    tracer.integrate(dt)
    tracer.life -= dt

    field = state.heightfield
    paint(field, tracer.x, tracer.z, -EROSION_RATE)
    entrain_grain(
        state,
        tracer.x,
        field.query(tracer.x, tracer.z) + ENTRAINMENT_HEIGHT,
        tracer.z,
    )

    if tracer.life <= 0 or not state.in_particle_bounds(tracer.x, tracer.z, BOUNDS_MARGIN):
        state.tracers.release(tracer)
        return False
    return True


def simulate_wind_tracers(
    state: "SimulationState",
    dt: float = TRACER_INTERVAL,
    spawn_count: int = TRACERS_PER_STEP,
) -> int:
    """Run one fixed sub-step of the tracer system.

    Returns:
        Number of tracers alive after the step.
    """
    for _ in range(spawn_count):
        if spawn_tracer(state) is None:
            break

    alive = 0
    for tracer in state.tracers.active():
        if step_tracer(state, tracer, dt):
            alive += 1
    return alive
