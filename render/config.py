"""
Configuration constants for the rendering domain.
Includes window dimensions, colors, font sizes, and other visual tuning values.
"""
from __future__ import annotations

from typing import Tuple

# =============================================================================
# UI LAYOUT & DIMENSIONS
# =============================================================================
VIRTUAL_WIDTH = 1280
VIRTUAL_HEIGHT = 720

MAP_SIZE = 600                        # Square terrain viewport in pixels
MAP_MARGIN = 20
SIDEBAR_X = MAP_SIZE + MAP_MARGIN * 2
LINE_HEIGHT = 20
FONT_SIZE = 18
LOG_PANEL_HEIGHT = 300

TRACER_RADIUS = 2                     # Tracer dot radius in pixels
GRAIN_RADIUS = 1                      # Grain dot radius in pixels
WIND_ARROW_LENGTH = 40                # Wind indicator length in pixels

# =============================================================================
# COLORS
# =============================================================================
# UI Colors
COLOR_BG_DARK = (20, 20, 25)
COLOR_BG_PANEL = (25, 25, 30)
COLOR_BORDER = (40, 40, 40)
COLOR_TEXT_WHITE = (230, 230, 230)
COLOR_TEXT_GRAY = (160, 160, 160)
COLOR_TEXT_DIM = (100, 100, 100)
COLOR_TEXT_HIGHLIGHT = (220, 200, 120)
COLOR_LOG_TEXT = (160, 200, 160)

# Terrain / particle colors
COLOR_SAND: Tuple[int, int, int] = (214, 184, 128)
COLOR_SAND_PIT: Tuple[int, int, int] = (120, 90, 60)    # Below-baseline erosion pits
COLOR_TRACER: Tuple[int, int, int] = (160, 210, 250)
COLOR_GRAIN: Tuple[int, int, int] = (250, 235, 190)
COLOR_WIND_ARROW: Tuple[int, int, int] = (230, 80, 60)

# Elevation-based brightness range
ELEVATION_BRIGHTNESS_MIN = 0.45
ELEVATION_BRIGHTNESS_MAX = 1.1
