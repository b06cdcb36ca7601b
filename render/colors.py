# render/colors.py
"""Color calculations for height-field rendering.

Elevation is mapped to a brightness multiplier on a sand base color.
"""
from __future__ import annotations

import numpy as np

from render.config import (
    COLOR_SAND,
    COLOR_SAND_PIT,
    ELEVATION_BRIGHTNESS_MIN,
    ELEVATION_BRIGHTNESS_MAX,
)


def shade_heights(heights: np.ndarray) -> np.ndarray:
    """Shade an elevation grid into a (w, h, 3) uint8 RGB array (vectorized).

    Cells below the baseline use the pit color so erosion holes stand out.
    """
    min_elev = float(np.min(heights))
    max_elev = float(np.max(heights))
    if max_elev == min_elev:
        brightness = np.ones_like(heights)
    else:
        normalized = (heights - min_elev) / (max_elev - min_elev)
        brightness = ELEVATION_BRIGHTNESS_MIN + normalized * (ELEVATION_BRIGHTNESS_MAX - ELEVATION_BRIGHTNESS_MIN)

    base = np.where(heights[..., None] < 0.0, np.array(COLOR_SAND_PIT), np.array(COLOR_SAND))
    rgb = base * brightness[..., None]
    return np.clip(rgb, 0, 255).astype(np.uint8)
