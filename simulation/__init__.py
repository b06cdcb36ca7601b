# simulation/__init__.py
"""Simulation modules for Erg.

- wind_tracers: fixed sub-step air tracers (erosion + entrainment)
- grains: per-frame ballistic sand grains (deposition)
- avalanche: sequential slope relaxation
- particles: fixed-capacity particle pools
"""

from simulation.particles import Particle, ParticlePool
from simulation.wind_tracers import simulate_wind_tracers
from simulation.grains import simulate_grains
from simulation.avalanche import apply_avalanche

__all__ = [
    "Particle",
    "ParticlePool",
    "simulate_wind_tracers",
    "simulate_grains",
    "apply_avalanche",
]
