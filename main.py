# main.py
"""
Erg - Aeolian Dune Prototype
Height-field dunes shaped by wind tracers, saltating grains and avalanches.

This module is the driver: it gates the run state and sequences the
systems each tick. Presentation layers (pygame_runner.py, benchmarks)
call simulate_tick() once per frame and read get_frame_output().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from game_state import SimulationState, build_initial_state, reseed_state
from simulation.avalanche import apply_avalanche
from simulation.grains import simulate_grains
from simulation.wind_tracers import simulate_wind_tracers
from utils import parse_step

LOGGER = logging.getLogger(__name__)


@dataclass
class FrameOutput:
    """Everything a renderer needs for one frame."""
    heights: np.ndarray            # Read-only (R+1, R+1) elevation grid
    tracer_positions: np.ndarray   # (n, 3) active tracer positions
    grain_positions: np.ndarray    # (m, 3) active grain positions


def simulate_tick(state: SimulationState, dt: float) -> None:
    """Run one frame of the simulation.

    Order is fixed: wind tracers (only when the fixed-step clock fires),
    then grains, then the avalanche pass. Does nothing while idle.
    """
    if not state.running:
        return

    if state.clock.advance(dt):
        simulate_wind_tracers(state, state.clock.step_interval)

    simulate_grains(state, dt)
    apply_avalanche(state.heightfield)


def get_frame_output(state: SimulationState) -> FrameOutput:
    return FrameOutput(
        heights=state.heightfield.heights_view(),
        tracer_positions=state.tracers.positions(),
        grain_positions=state.grains.positions(),
    )


# =============================================================================
# RUN STATE
# =============================================================================

def start(state: SimulationState) -> None:
    """idle -> running."""
    if state.running:
        return
    state.running = True
    state.messages.append("Wind rises. Simulation running.")
    LOGGER.debug("Simulation started at t=%.2fs", state.elapsed)


def pause(state: SimulationState) -> None:
    """running -> idle; terrain and particles stay frozen as last computed."""
    if not state.running:
        return
    state.running = False
    state.messages.append("Simulation paused.")
    LOGGER.debug("Simulation paused at t=%.2fs", state.elapsed)


def toggle_running(state: SimulationState) -> None:
    if state.running:
        pause(state)
    else:
        start(state)


def reset(state: SimulationState) -> None:
    """Clear particles, reseed the dunes and return to idle."""
    state.running = False
    reseed_state(state)
    state.messages.append(f"Dune field reseeded ({len(state.dune_sources)} dunes).")


# =============================================================================
# WIND INPUT
# =============================================================================

def adjust_wind(state: SimulationState, speed_steps: int = 0, direction_steps: int = 0) -> None:
    """Apply input steps to the wind using the configured deltas.

    Speed is clamped at zero; direction wraps around the full circle.
    """
    config = state.config
    if speed_steps:
        state.wind.adjust_speed(speed_steps * config.wind_speed_delta)
    if direction_steps:
        state.wind.adjust_direction(direction_steps * config.wind_direction_delta)
    if speed_steps or direction_steps:
        state.messages.append(
            f"Wind {state.wind.speed:.1f} @ {state.wind.degrees:.0f} deg")


# =============================================================================
# COMMANDS
# =============================================================================

def show_status(state: SimulationState) -> None:
    low, high = state.heightfield.elevation_range()
    run_state = "running" if state.running else "idle"
    state.messages.append(
        f"{run_state} t={state.elapsed:.1f}s | wind {state.wind.speed:.1f} @ "
        f"{state.wind.degrees:.0f} deg | tracers {state.tracers.active_count}/"
        f"{state.tracers.capacity} | grains {state.grains.active_count}/"
        f"{state.grains.capacity} | elev {low:.2f}..{high:.2f}")


def wind_command(state: SimulationState, args: List[str]) -> None:
    """'wind speed <step>' or 'wind dir <step>' with steps like +, -, ++, +3."""
    target, step = args[0], parse_step(args[1])
    if target == "speed":
        adjust_wind(state, speed_steps=step)
    elif target in ("dir", "direction"):
        adjust_wind(state, direction_steps=step)
    else:
        raise ValueError(target)


def handle_command(state: SimulationState, cmd: str, args: List[str]) -> bool:
    """Process a text command. Returns True if the program should quit."""
    command_map = {
        "start": lambda s, a: start(s),
        "pause": lambda s, a: pause(s),
        "reset": lambda s, a: reset(s),
        "wind": wind_command,
        "status": lambda s, a: show_status(s),
    }
    if cmd == "quit":
        return True
    handler = command_map.get(cmd)
    if not handler:
        state.messages.append(f"Unknown command: {cmd}")
        return False
    try:
        handler(state, args)
    except (TypeError, ValueError, IndexError):
        state.messages.append(f"Invalid usage for '{cmd}'.")
    return False


def run_headless(state: SimulationState, frames: int, dt: float) -> SimulationState:
    """Start the simulation and advance it a fixed number of frames."""
    start(state)
    for _ in range(frames):
        simulate_tick(state, dt)
    return state


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run the dune simulation headless")
    parser.add_argument("--frames", type=int, default=600, help="Frames to simulate")
    parser.add_argument("--dt", type=float, default=1 / 60, help="Frame delta in seconds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    from config import SimulationConfig

    sim = run_headless(build_initial_state(SimulationConfig(seed=args.seed)), args.frames, args.dt)
    show_status(sim)
    for message in sim.messages:
        print(message)
