# render/overlays.py
"""Overlay rendering: help screen, event log."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

import pygame

from render.primitives import draw_text
from render.config import (
    LINE_HEIGHT,
    COLOR_BG_PANEL,
    COLOR_LOG_TEXT,
    COLOR_TEXT_HIGHLIGHT,
    COLOR_TEXT_GRAY,
)

if TYPE_CHECKING:
    from game_state import SimulationState


def render_help_overlay(
    surface,
    font,
    controls: List[str],
    pos: Tuple[int, int],
    available_width: int,
    available_height: int,
) -> None:
    """Render the help overlay with control descriptions.

    Args:
        surface: The pygame surface to draw on.
        font: The pygame font to use for rendering text.
        controls: A list of strings, each describing a control.
        pos: The (x, y) coordinates for the top-left corner of the overlay.
        available_width: The maximum width for the overlay.
        available_height: The maximum height for the overlay.
    """
    x, y = pos
    row_height = 18

    pygame.draw.rect(surface, COLOR_BG_PANEL, (x - 4, y - 4, available_width, available_height), 0)
    draw_text(surface, font, "CONTROLS", (x, y), color=COLOR_TEXT_HIGHLIGHT)
    y += row_height + 4

    for control in controls:
        if y + row_height >= pos[1] + available_height:
            break
        draw_text(surface, font, control, (x, y), color=COLOR_TEXT_GRAY)
        y += row_height


def render_event_log(
    surface,
    font,
    state: "SimulationState",
    pos: Tuple[int, int],
    max_height: int,
) -> None:
    """Render the most recent event log messages that fit in max_height."""
    log_x, log_y = pos
    messages = state.messages  # messages is a deque

    draw_text(surface, font, "EVENT LOG", (log_x, log_y), color=COLOR_TEXT_HIGHLIGHT)
    log_y += LINE_HEIGHT + 4

    visible_count = (max_height - 40) // 18
    if visible_count <= 0:
        return

    # Iterate directly over the deque using indices to avoid creating a list
    start_idx = max(0, len(messages) - visible_count)
    for i in range(start_idx, len(messages)):
        draw_text(surface, font, f"- {messages[i]}", (log_x, log_y), color=COLOR_LOG_TEXT)
        log_y += 18
