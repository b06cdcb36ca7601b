import numpy as np
import pytest

from simulation.particles import Particle, ParticlePool


def test_pool_starts_empty():
    pool = ParticlePool(3, Particle)
    assert pool.capacity == 3
    assert pool.active_count == 0
    assert pool.positions().shape == (0, 3)


def test_acquire_is_first_fit_and_bounded():
    pool = ParticlePool(3, Particle)
    a, b, c = pool.acquire(), pool.acquire(), pool.acquire()
    assert [pool.index_of(p) for p in (a, b, c)] == [0, 1, 2]
    assert pool.acquire() is None

    pool.release(b)
    again = pool.acquire()
    assert again is b
    assert pool.index_of(again) == 1


def test_release_keeps_stale_contents():
    pool = ParticlePool(2, Particle)
    p = pool.acquire()
    p.place(1.0, 2.0, 3.0)
    pool.release(p)
    assert not p.active
    assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)


def test_clear_deactivates_everything():
    pool = ParticlePool(4, Particle)
    for _ in range(4):
        pool.acquire()
    pool.clear()
    assert pool.active_count == 0
    assert list(pool.active()) == []
    assert len(pool) == 4


def test_positions_lists_active_slots_in_order():
    pool = ParticlePool(3, Particle)
    first, second, third = pool.acquire(), pool.acquire(), pool.acquire()
    first.place(1.0, 0.0, 0.0)
    second.place(2.0, 0.0, 0.0)
    third.place(3.0, 0.0, 0.0)
    pool.release(second)

    assert np.array_equal(pool.positions(), [[1.0, 0.0, 0.0], [3.0, 0.0, 0.0]])


def test_index_of_foreign_particle_raises():
    pool = ParticlePool(1, Particle)
    with pytest.raises(ValueError):
        pool.index_of(Particle())


def test_integrate_moves_by_velocity():
    p = Particle()
    p.launch(1.0, -2.0, 0.5, life=3.0)
    p.integrate(0.5)
    assert (p.x, p.y, p.z) == (0.5, -1.0, 0.25)
    assert p.life == 3.0
