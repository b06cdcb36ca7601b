# render/hud.py
"""Sidebar HUD: run state, wind, particle counts and terrain range."""
from __future__ import annotations

from typing import TYPE_CHECKING

from render.primitives import draw_text, draw_section_header
from render.config import (
    LINE_HEIGHT,
    COLOR_TEXT_GRAY,
    COLOR_TEXT_HIGHLIGHT,
    COLOR_TEXT_WHITE,
)

if TYPE_CHECKING:
    from game_state import SimulationState


def render_hud(surface, font, state: "SimulationState", x: int, y: int) -> int:
    """Render the status block. Returns the y position after the block."""
    y = draw_section_header(surface, font, "DUNE FIELD", (x, y))

    run_color = COLOR_TEXT_HIGHLIGHT if state.running else COLOR_TEXT_GRAY
    draw_text(surface, font, "RUNNING" if state.running else "IDLE (Space to start)", (x, y), run_color)
    y += LINE_HEIGHT

    low, high = state.heightfield.elevation_range()
    lines = [
        f"Time: {state.elapsed:.1f}s  (sub-steps {state.clock.step_count})",
        f"Wind: {state.wind.speed:.1f} @ {state.wind.degrees:.0f} deg",
        f"Tracers: {state.tracers.active_count}/{state.tracers.capacity}",
        f"Grains: {state.grains.active_count}/{state.grains.capacity}",
        f"Elevation: {low:.2f} .. {high:.2f}",
        f"Sand: {state.heightfield.total_mass():.1f}",
    ]
    for line in lines:
        draw_text(surface, font, line, (x, y), COLOR_TEXT_WHITE)
        y += LINE_HEIGHT
    return y
