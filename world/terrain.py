# world/terrain.py
"""
Height-field terrain for Erg.

The terrain is a square grid of (R+1) x (R+1) float elevations spanning a
world rectangle centered on the origin. Grids are indexed [gx, gz] (x first),
matching the rest of the codebase.

ELEVATION MODEL:
- 0.0 is the baseline plane ("sea level")
- Values are unbounded; erosion may drive cells below the baseline
- Anything off the terrain reads as 0.0
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from scipy import ndimage

from config import SMOOTHING_FACTOR

GridPoint = Tuple[int, int]

# 3x3 box kernel for smoothing (cell itself + 8 neighbors)
_BOX_KERNEL = np.ones((3, 3), dtype=np.float64)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity."""
    return int(math.floor(value + 0.5))


class HeightField:
    """Grid of terrain elevations with a fixed world<->grid mapping."""

    def __init__(self, width: float, depth: float, resolution: int) -> None:
        self.width = float(width)
        self.depth = float(depth)
        self.resolution = int(resolution)
        self.cell_size_x = self.width / self.resolution
        self.cell_size_z = self.depth / self.resolution
        self.heights = np.zeros((self.resolution + 1, self.resolution + 1), dtype=np.float64)

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_depth(self) -> float:
        return self.depth / 2

    # === Coordinate mapping ===
    def world_to_grid(self, x: float, z: float) -> GridPoint:
        """Nearest grid cell for a world coordinate (may be out of bounds)."""
        gx = round_half_up((x + self.half_width) / self.cell_size_x)
        gz = round_half_up((z + self.half_depth) / self.cell_size_z)
        return gx, gz

    def grid_to_world(self, gx: int, gz: int) -> Tuple[float, float]:
        """World coordinate of a grid sample."""
        return gx * self.cell_size_x - self.half_width, gz * self.cell_size_z - self.half_depth

    def in_bounds(self, gx: int, gz: int) -> bool:
        return 0 <= gx <= self.resolution and 0 <= gz <= self.resolution

    def contains(self, x: float, z: float, margin: float = 0.0) -> bool:
        """Check if a world coordinate lies on the terrain (optionally expanded by margin)."""
        return (
            -self.half_width - margin <= x <= self.half_width + margin
            and -self.half_depth - margin <= z <= self.half_depth + margin
        )

    # === Reads ===
    def cell_height(self, gx: int, gz: int) -> float:
        """Elevation of a grid cell, or 0.0 outside the grid."""
        if not self.in_bounds(gx, gz):
            return 0.0
        return float(self.heights[gx, gz])

    def query(self, x: float, z: float) -> float:
        """Elevation at the grid cell nearest to (x, z).

        Off-terrain coordinates return 0.0 rather than the nearest edge value,
        so the space around the dune field behaves as the baseline plane.
        """
        if not self.contains(x, z):
            return 0.0
        gx, gz = self.world_to_grid(x, z)
        return self.cell_height(gx, gz)

    def heights_view(self) -> np.ndarray:
        """Read-only view of the elevation grid for renderers."""
        view = self.heights.view()
        view.flags.writeable = False
        return view

    def elevation_range(self) -> Tuple[float, float]:
        """Returns (min_elevation, max_elevation) across the grid."""
        return float(np.min(self.heights)), float(np.max(self.heights))

    def total_mass(self) -> float:
        """Sum of all elevations (sand volume in height units)."""
        return float(np.sum(self.heights))

    # === Whole-grid operations ===
    def smooth(self, factor: float = SMOOTHING_FACTOR) -> None:
        """Apply one 3x3 box-blur relaxation pass.

        Each cell becomes avg(neighborhood) * factor + original * (1 - factor).
        The neighborhood counts only in-bounds cells, so edges and corners
        average over 6 and 4 samples respectively. All averages are taken
        from the heights before the pass.
        """
        sums = ndimage.convolve(self.heights, _BOX_KERNEL, mode="constant", cval=0.0)
        counts = ndimage.convolve(np.ones_like(self.heights), _BOX_KERNEL, mode="constant", cval=0.0)
        average = sums / counts
        self.heights[:] = average * factor + self.heights * (1 - factor)

    def reset(self) -> None:
        """Flatten the terrain back to the baseline plane."""
        self.heights.fill(0.0)
