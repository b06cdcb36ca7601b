# config.py
"""
Centralized configuration for Erg.

This file contains high-level, cross-cutting constants and the
SimulationConfig record handed to build_initial_state().
Domain-specific constants are in:
- simulation/config.py (brush, avalanche, particle tuning)
- render/config.py (colors, window dimensions, etc.)
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

# =============================================================================
# TERRAIN GEOMETRY
# =============================================================================
# World extent of the dune field, centered on the origin
TERRAIN_WIDTH = 100.0   # World units along x
TERRAIN_DEPTH = 100.0   # World units along z

# Grid resolution R: the height field holds (R+1) x (R+1) samples
RESOLUTION = 96

# =============================================================================
# DUNES
# =============================================================================
DUNE_HEIGHT = 6.0       # Peak elevation stamped per dune seed
DUNE_COUNT = 10         # Number of dune seeds stamped on reset

# =============================================================================
# SAND & WIND
# =============================================================================
SAND_AMOUNT = 1500      # Grain pool capacity

WIND_SPEED = 6.0                        # Initial wind speed (world units / s)
WIND_DIRECTION = 0.0                    # Initial heading in radians (0 = +x)
WIND_SPEED_DELTA = 0.5                  # Speed change per input step
WIND_DIRECTION_DELTA = math.pi / 36     # Heading change per input step (5 degrees)

# =============================================================================
# TERRAIN EDITING
# =============================================================================
BRUSH_RADIUS = 2             # Paint radius in grid cells (linear falloff to 0 at the rim)
SMOOTHING_FACTOR = 0.5       # Blend between 3x3 average and original height
SMOOTHING_PASSES = 4         # Box-blur passes applied after dune stamping

# Dune stamping
DUNE_RADIUS = 12.0           # Base footprint radius in world units (scaled per dune)
DUNE_SCALE_MIN = 0.6         # Random scale factor range for x/z footprint
DUNE_SCALE_MAX = 1.4
DUNE_LIFT_MIN = 0.3          # Random vertical scale range (also grain spawn lift)
DUNE_LIFT_MAX = 1.0
DUNE_STAMP_FACTOR = 0.25     # Fraction of the dune height added per stamp

# =============================================================================
# TIME & SIMULATION
# =============================================================================
TRACER_INTERVAL = 0.1   # Fixed wind tracer sub-step (s), independent of frame rate
FRAME_RATE = 60         # Target frames per second for the viewer
MAX_FRAME_DT = 0.1      # Longest frame delta fed to the simulation (s)


@dataclass
class SimulationConfig:
    """Construction/reset parameters for a simulation.

    Values are assumed valid (positive sizes and counts).
    """
    terrain_width: float = TERRAIN_WIDTH
    terrain_depth: float = TERRAIN_DEPTH
    resolution: int = RESOLUTION
    dune_height: float = DUNE_HEIGHT
    dune_count: int = DUNE_COUNT
    sand_amount: int = SAND_AMOUNT
    wind_speed: float = WIND_SPEED
    wind_direction: float = WIND_DIRECTION
    wind_speed_delta: float = WIND_SPEED_DELTA
    wind_direction_delta: float = WIND_DIRECTION_DELTA
    seed: Optional[int] = None
