# render/map.py
"""Top-down terrain and particle rendering.

The height field is shaded into a small surface (one pixel per grid sample)
and scaled into the map viewport; particles are drawn as dots on top.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

import numpy as np
import pygame

from render.colors import shade_heights
from render.config import (
    COLOR_GRAIN,
    COLOR_TRACER,
    COLOR_WIND_ARROW,
    GRAIN_RADIUS,
    TRACER_RADIUS,
    WIND_ARROW_LENGTH,
)

if TYPE_CHECKING:
    from main import FrameOutput
    from world.terrain import HeightField
    from world.wind import WindState


def world_to_screen(
    field: "HeightField",
    rect: pygame.Rect,
    x: float,
    z: float,
) -> Tuple[int, int]:
    """Map a world (x, z) to a pixel inside the viewport rect."""
    sx = rect.x + (x + field.half_width) / field.width * rect.width
    sy = rect.y + (z + field.half_depth) / field.depth * rect.height
    return int(sx), int(sy)


def render_terrain(surface: pygame.Surface, heights: np.ndarray, rect: pygame.Rect) -> None:
    """Shade the elevation grid and blit it scaled into rect."""
    # surfarray indexes [x, y], matching the [gx, gz] grid layout
    terrain = pygame.surfarray.make_surface(shade_heights(heights))
    surface.blit(pygame.transform.smoothscale(terrain, rect.size), rect.topleft)


def render_particles(
    surface: pygame.Surface,
    field: "HeightField",
    rect: pygame.Rect,
    positions: np.ndarray,
    color: Tuple[int, int, int],
    radius: int,
) -> None:
    """Draw active particles that fall inside the viewport."""
    for x, _, z in positions:
        px, py = world_to_screen(field, rect, x, z)
        if rect.collidepoint(px, py):
            pygame.draw.circle(surface, color, (px, py), radius)


def render_wind_arrow(surface: pygame.Surface, wind: "WindState", center: Tuple[int, int]) -> None:
    """Draw the wind heading as an arrow; length does not follow speed."""
    ux, uz = wind.unit_vector
    cx, cy = center
    tip = (cx + ux * WIND_ARROW_LENGTH, cy + uz * WIND_ARROW_LENGTH)
    pygame.draw.line(surface, COLOR_WIND_ARROW, center, tip, 3)
    for side in (-1, 1):
        angle = wind.direction + math.pi + side * math.radians(25)
        barb = (tip[0] + math.cos(angle) * 10, tip[1] + math.sin(angle) * 10)
        pygame.draw.line(surface, COLOR_WIND_ARROW, tip, barb, 3)


def render_map(
    surface: pygame.Surface,
    field: "HeightField",
    frame: "FrameOutput",
    rect: pygame.Rect,
) -> None:
    """Render terrain, then grains, then tracers into the map viewport."""
    render_terrain(surface, frame.heights, rect)
    render_particles(surface, field, rect, frame.grain_positions, COLOR_GRAIN, GRAIN_RADIUS)
    render_particles(surface, field, rect, frame.tracer_positions, COLOR_TRACER, TRACER_RADIUS)
