# world/brush.py
"""Brush-style height edits with radial falloff.

Used for dune stamping at reset and for erosion/deposition every tick.
"""
from __future__ import annotations

import math

from config import BRUSH_RADIUS
from world.terrain import HeightField


def paint(field: HeightField, x: float, z: float, delta: float, radius: int = BRUSH_RADIUS) -> None:
    """Add delta around the grid cell nearest to (x, z).

    Every cell within `radius` grid units (Euclidean) of the center gets
    delta * max(0, 1 - dist / radius). Nothing happens when the center cell
    is off the grid; cells of the brush that fall outside are skipped.
    """
    cx, cz = field.world_to_grid(x, z)
    if not field.in_bounds(cx, cz):
        return

    heights = field.heights
    for dx in range(-radius, radius + 1):
        gx = cx + dx
        if not 0 <= gx <= field.resolution:
            continue
        for dz in range(-radius, radius + 1):
            gz = cz + dz
            if not 0 <= gz <= field.resolution:
                continue
            dist = math.sqrt(dx * dx + dz * dz)
            if dist > radius:
                continue
            weight = max(0.0, 1.0 - dist / radius)
            if weight > 0.0:
                heights[gx, gz] += delta * weight
