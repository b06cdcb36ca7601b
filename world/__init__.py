"""
World module: terrain, brush, wind, clocks, and dune generation.

Provides:
- Height field terrain (from terrain.py)
- Radial-falloff terrain brush (from brush.py)
- Global wind state (from wind.py)
- Frame and fixed-step clocks (from clock.py)
- Dune field generation (from generation.py)
"""

# Core terrain types and utilities
from world.terrain import HeightField, round_half_up

# Terrain brush
from world.brush import paint

# Wind
from world.wind import WindState, wrap_angle

# Clocks
from world.clock import SimulationClock

# Dune generation
from world.generation import (
    DuneSeed,
    generate_dune_seeds,
    stamp_dune,
    generate_dune_field,
)

__all__ = [
    # Terrain
    "HeightField",
    "round_half_up",
    # Brush
    "paint",
    # Wind
    "WindState",
    "wrap_angle",
    # Clocks
    "SimulationClock",
    # Generation
    "DuneSeed",
    "generate_dune_seeds",
    "stamp_dune",
    "generate_dune_field",
]
