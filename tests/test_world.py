import math

import numpy as np
import pytest

from config import SimulationConfig
from world.clock import SimulationClock
from world.generation import DuneSeed, generate_dune_field, generate_dune_seeds, stamp_dune
from world.terrain import HeightField
from world.wind import WindState, wrap_angle


# === Wind ===

def test_wrap_angle_range():
    assert wrap_angle(0.0) == 0.0
    assert wrap_angle(2 * math.pi) == pytest.approx(0.0)
    assert wrap_angle(-math.pi / 2) == pytest.approx(1.5 * math.pi)
    assert 0.0 <= wrap_angle(-1e-18) < 2 * math.pi


def test_wind_state_normalizes_on_creation():
    wind = WindState(direction=-math.pi / 2, speed=-3.0)
    assert wind.direction == pytest.approx(1.5 * math.pi)
    assert wind.speed == 0.0


def test_wind_speed_clamps_at_zero():
    wind = WindState(speed=1.0)
    assert wind.adjust_speed(-5.0) == 0.0
    assert wind.adjust_speed(2.5) == 2.5


def test_wind_direction_wraps():
    wind = WindState(direction=1.9 * math.pi)
    wind.adjust_direction(0.2 * math.pi)
    assert wind.direction == pytest.approx(0.1 * math.pi)


def test_wind_vectors():
    wind = WindState(direction=math.pi / 2, speed=4.0)
    ux, uz = wind.unit_vector
    assert (ux, uz) == pytest.approx((0.0, 1.0))
    assert wind.perpendicular == pytest.approx((-1.0, 0.0))
    assert wind.velocity == pytest.approx((0.0, 4.0))
    assert wind.degrees == pytest.approx(90.0)


# === Clock ===

def test_clock_fires_once_interval_is_reached():
    clock = SimulationClock(step_interval=0.1)
    assert clock.advance(0.06) is False
    assert clock.advance(0.06) is True
    assert clock.accumulator == 0.0
    assert clock.step_count == 1
    assert clock.frame_count == 2
    assert clock.elapsed == pytest.approx(0.12)


def test_clock_drops_overshoot_instead_of_catching_up():
    clock = SimulationClock(step_interval=0.1)
    assert clock.advance(0.35) is True
    assert clock.accumulator == 0.0
    assert clock.advance(0.01) is False
    assert clock.step_count == 1


def test_clock_reset():
    clock = SimulationClock(step_interval=0.1)
    clock.advance(0.2)
    clock.reset()
    assert (clock.elapsed, clock.frame_count, clock.accumulator, clock.step_count) == (0.0, 0, 0.0, 0)
    assert clock.step_interval == 0.1


# === Dune generation ===

def test_dune_seeds_stay_on_terrain():
    config = SimulationConfig(dune_count=25)
    seeds = generate_dune_seeds(config, np.random.default_rng(0))
    assert len(seeds) == 25
    for seed in seeds:
        assert abs(seed.x) <= config.terrain_width / 2
        assert abs(seed.z) <= config.terrain_depth / 2
        assert 0.0 < seed.height <= config.dune_height
        assert seed.lift > 0.0


def test_stamp_dune_raises_center_most():
    field = HeightField(100.0, 100.0, 50)
    stamp_dune(field, DuneSeed(x=0.0, z=0.0, height=6.0))
    center = field.query(0.0, 0.0)
    assert center > 0.0
    assert center >= field.query(6.0, 0.0) >= field.query(10.0, 0.0)
    assert field.query(30.0, 30.0) == 0.0


def test_random_surface_point_inside_footprint():
    seed = DuneSeed(x=5.0, z=-5.0, height=1.0, scale=(0.5, 1.0, 1.5))
    rng = np.random.default_rng(1)
    for _ in range(50):
        x, z = seed.random_surface_point(rng)
        r = ((x - seed.x) / seed.radius_x) ** 2 + ((z - seed.z) / seed.radius_z) ** 2
        assert r <= 1.0 + 1e-9


def test_generation_is_reproducible_for_a_seed():
    config = SimulationConfig(resolution=24, dune_count=4)
    first, seeds_a = generate_dune_field(config, np.random.default_rng(9))
    second, seeds_b = generate_dune_field(config, np.random.default_rng(9))
    assert np.array_equal(first.heights, second.heights)
    assert seeds_a == seeds_b
    assert first.total_mass() > 0.0


def test_zero_dunes_gives_flat_field():
    config = SimulationConfig(resolution=8, dune_count=0)
    field, seeds = generate_dune_field(config, np.random.default_rng(0))
    assert seeds == []
    assert not field.heights.any()
