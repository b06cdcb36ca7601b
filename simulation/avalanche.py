# simulation/avalanche.py
"""Slope relaxation (avalanche) pass.

Caps the height difference between a cell and its four neighbors at the
angle of repose. The pass is sequential: cells are scanned row by row
(gx outer, gz inner) over the interior only, each cell checks its neighbors
in the order up (gx-1), down (gx+1), left (gz-1), right (gz+1), and every
transfer is applied before the next comparison. Later checks in the same
pass therefore see already-moved sand, and the resulting dune shapes depend
on this exact order. Do not replace it with a double-buffered diffusion.
"""
from __future__ import annotations

from simulation.config import MAX_SLOPE
from world.terrain import HeightField


def apply_avalanche(field: HeightField, max_slope: float = MAX_SLOPE) -> float:
    """Run one full relaxation pass in place.

    Where a cell stands more than max_slope above a neighbor, half of the
    excess moves from the cell to that neighbor.

    Returns:
        Total height moved during the pass.
    """
    res = field.resolution
    # Python lists are far faster than per-element NumPy indexing here.
    # Both hold float64, so results match a direct array walk exactly.
    rows = field.heights.tolist()
    moved = 0.0

    for gx in range(1, res):
        row = rows[gx]
        up = rows[gx - 1]
        down = rows[gx + 1]
        for gz in range(1, res):
            # up
            diff = row[gz] - up[gz]
            if diff > max_slope:
                t = (diff - max_slope) * 0.5
                row[gz] -= t
                up[gz] += t
                moved += t
            # down
            diff = row[gz] - down[gz]
            if diff > max_slope:
                t = (diff - max_slope) * 0.5
                row[gz] -= t
                down[gz] += t
                moved += t
            # left
            diff = row[gz] - row[gz - 1]
            if diff > max_slope:
                t = (diff - max_slope) * 0.5
                row[gz] -= t
                row[gz - 1] += t
                moved += t
            # right
            diff = row[gz] - row[gz + 1]
            if diff > max_slope:
                t = (diff - max_slope) * 0.5
                row[gz] -= t
                row[gz + 1] += t
                moved += t

    field.heights[:] = rows
    return moved
