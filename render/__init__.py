"""
Rendering module for the Erg pygame viewer.

Provides modular rendering functions for the terrain map, HUD, and overlays.
"""
from render.colors import shade_heights
from render.primitives import draw_text, draw_section_header
from render.map import render_map, render_wind_arrow, world_to_screen
from render.hud import render_hud
from render.overlays import render_help_overlay, render_event_log

__all__ = [
    # Colors
    "shade_heights",
    # Primitives
    "draw_text",
    "draw_section_header",
    # Map
    "render_map",
    "render_wind_arrow",
    "world_to_screen",
    # HUD
    "render_hud",
    # Overlays
    "render_help_overlay",
    "render_event_log",
]
