# simulation/config.py
"""
Configuration constants for the simulation domain.
Includes avalanche, wind tracer and grain tuning values.
Terrain brush and dune stamping values live in the top-level config.py.
"""
from __future__ import annotations

import math

# =============================================================================
# AVALANCHE
# =============================================================================
ANGLE_OF_REPOSE = 34.0                               # Degrees, dry sand
MAX_SLOPE = math.tan(math.radians(ANGLE_OF_REPOSE))  # Max height difference between neighbors

# =============================================================================
# BOUNDS
# =============================================================================
BOUNDS_MARGIN = 10.0         # Particles survive this far beyond the terrain box

# =============================================================================
# WIND TRACERS
# =============================================================================
TRACER_COUNT = 120           # Tracer pool capacity
TRACERS_PER_STEP = 4         # Spawn attempts per sub-step
TRACER_LIFE = 6.0            # Seconds
TRACER_UPWIND_OFFSET = 5.0   # Max outward offset from the upwind edge (< BOUNDS_MARGIN)
TRACER_ALTITUDE = 1.0        # Spawn height above the baseline plane
TRACER_NOISE = 0.5           # Per-axis velocity noise (+-)
WIND_STRENGTH = 1.0          # Scales wind speed into tracer velocity
EROSION_RATE = 0.01          # Height removed per tracer per sub-step

# =============================================================================
# GRAINS
# =============================================================================
GRAINS_PER_FRAME = 6         # Spawn attempts per frame from dune sources
GRAIN_LIFE = 3.0             # Seconds
GRAIN_SIZE = 0.01            # Height added on ground contact
GRAVITY = 9.8                # Downward acceleration
GRAIN_LIFT = 3.0             # Max vertical launch speed
GRAIN_SPREAD = math.pi / 8   # Launch heading spread around the wind (+-)
GRAIN_JITTER = 0.5           # Horizontal velocity jitter (+-)
GRAIN_SPEED_FACTOR = 0.5     # Fraction of wind speed given to launched grains
ENTRAINMENT_HEIGHT = 0.05    # Lift above the surface for tracer-entrained grains
