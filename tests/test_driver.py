import math

import numpy as np
import pytest

import main
from config import SimulationConfig
from game_state import build_initial_state, reseed_state
from main import (
    adjust_wind,
    get_frame_output,
    handle_command,
    pause,
    reset,
    run_headless,
    simulate_tick,
    start,
    toggle_running,
)


def test_initial_state_is_idle(dune_state):
    assert dune_state.is_idle
    assert dune_state.tracers.active_count == 0
    assert dune_state.grains.active_count == 0
    assert dune_state.grains.capacity == dune_state.config.sand_amount
    assert len(dune_state.dune_sources) == 3
    assert dune_state.heightfield.heights.shape == (17, 17)


def test_same_seed_builds_same_terrain():
    config = SimulationConfig(resolution=12, dune_count=2, seed=5)
    a = build_initial_state(config)
    b = build_initial_state(config)
    assert np.array_equal(a.heightfield.heights, b.heightfield.heights)


def test_idle_tick_changes_nothing(dune_state):
    before = dune_state.heightfield.heights.copy()
    simulate_tick(dune_state, 0.5)
    assert np.array_equal(dune_state.heightfield.heights, before)
    assert dune_state.clock.frame_count == 0
    assert dune_state.grains.active_count == 0


def test_systems_run_in_fixed_order(dune_state, monkeypatch):
    calls = []
    monkeypatch.setattr(main, "simulate_wind_tracers", lambda s, dt: calls.append("tracers"))
    monkeypatch.setattr(main, "simulate_grains", lambda s, dt: calls.append("grains"))
    monkeypatch.setattr(main, "apply_avalanche", lambda f: calls.append("avalanche"))
    start(dune_state)

    simulate_tick(dune_state, 0.06)
    assert calls == ["grains", "avalanche"]

    calls.clear()
    simulate_tick(dune_state, 0.06)
    assert calls == ["tracers", "grains", "avalanche"]


def test_tracers_use_the_fixed_step(dune_state, monkeypatch):
    seen = []
    monkeypatch.setattr(main, "simulate_wind_tracers", lambda s, dt: seen.append(dt))
    start(dune_state)
    simulate_tick(dune_state, 0.1)
    assert seen == [dune_state.clock.step_interval]


def test_running_simulation_moves_sand(dune_state):
    run_headless(dune_state, frames=30, dt=1 / 30)
    assert dune_state.running
    assert dune_state.clock.frame_count == 30
    assert dune_state.tracers.active_count > 0
    assert dune_state.grains.active_count > 0


def test_pause_freezes_terrain(dune_state):
    run_headless(dune_state, frames=10, dt=1 / 30)
    pause(dune_state)
    before = dune_state.heightfield.heights.copy()
    simulate_tick(dune_state, 1 / 30)
    assert np.array_equal(dune_state.heightfield.heights, before)


def test_toggle_running(flat_state):
    toggle_running(flat_state)
    assert flat_state.running
    toggle_running(flat_state)
    assert flat_state.is_idle


def test_reset_returns_to_idle_with_empty_pools(dune_state):
    run_headless(dune_state, frames=20, dt=1 / 30)
    dune_state.wind.speed = 9.0

    reset(dune_state)

    assert dune_state.is_idle
    assert dune_state.tracers.active_count == 0
    assert dune_state.grains.active_count == 0
    assert dune_state.clock.frame_count == 0
    assert dune_state.wind.speed == 9.0
    assert "reseeded" in dune_state.messages[-1]


def test_reseed_replaces_terrain(dune_state):
    old_field = dune_state.heightfield
    reseed_state(dune_state)
    assert dune_state.heightfield is not old_field
    assert len(dune_state.dune_sources) == dune_state.config.dune_count


def test_adjust_wind_uses_configured_deltas(flat_state):
    config = flat_state.config
    speed = flat_state.wind.speed
    adjust_wind(flat_state, speed_steps=2)
    assert flat_state.wind.speed == pytest.approx(speed + 2 * config.wind_speed_delta)

    adjust_wind(flat_state, direction_steps=-1)
    expected = (config.wind_direction - config.wind_direction_delta) % (2 * math.pi)
    assert flat_state.wind.direction == pytest.approx(expected)
    assert flat_state.messages[-1].startswith("Wind ")


def test_adjust_wind_never_goes_negative(flat_state):
    adjust_wind(flat_state, speed_steps=-1000)
    assert flat_state.wind.speed == 0.0


def test_frame_output(dune_state):
    run_headless(dune_state, frames=10, dt=1 / 30)
    frame = get_frame_output(dune_state)
    assert frame.heights.shape == (17, 17)
    assert not frame.heights.flags.writeable
    assert frame.tracer_positions.shape == (dune_state.tracers.active_count, 3)
    assert frame.grain_positions.shape == (dune_state.grains.active_count, 3)


# === Text commands ===

def test_quit_command(flat_state):
    assert handle_command(flat_state, "quit", []) is True


def test_start_and_pause_commands(flat_state):
    assert handle_command(flat_state, "start", []) is False
    assert flat_state.running
    handle_command(flat_state, "pause", [])
    assert flat_state.is_idle


def test_wind_command(flat_state):
    speed = flat_state.wind.speed
    handle_command(flat_state, "wind", ["speed", "++"])
    assert flat_state.wind.speed == pytest.approx(speed + 2 * flat_state.config.wind_speed_delta)


@pytest.mark.parametrize("args", [[], ["speed"], ["gust", "+"], ["dir", "left"]])
def test_bad_wind_usage(flat_state, args):
    handle_command(flat_state, "wind", args)
    assert flat_state.messages[-1] == "Invalid usage for 'wind'."


def test_unknown_command(flat_state):
    assert handle_command(flat_state, "dance", []) is False
    assert flat_state.messages[-1] == "Unknown command: dance"


def test_status_command(flat_state):
    handle_command(flat_state, "status", [])
    assert flat_state.messages[-1].startswith("idle")
