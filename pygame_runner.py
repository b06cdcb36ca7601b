# pygame_runner.py
"""
Pygame-CE frontend for the Erg dune prototype.

Architecture:
- Virtual screen space: fixed 1280x720 layout surface
- Screen space: actual window pixels (scales with resize, letterboxed)
- The simulation core is driven once per frame through simulate_tick()

Controls:
- Space: start / pause
- R: reset dunes
- Arrow keys: wind speed (up/down) and direction (left/right)
- H: show help
- ESC: quit
"""
from __future__ import annotations

import sys

try:
    import pygame
except ImportError as exc:
    raise SystemExit("pygame-ce is required. Install with: pip install pygame-ce") from exc

from config import FRAME_RATE, MAX_FRAME_DT, SimulationConfig
from main import (
    SimulationState,
    adjust_wind,
    build_initial_state,
    get_frame_output,
    reset,
    simulate_tick,
    toggle_running,
)
from keybindings import (
    CONTROL_DESCRIPTIONS,
    HELP_KEY,
    QUIT_KEY,
    RESET_KEY,
    START_PAUSE_KEY,
    WIND_KEYS,
)
from render import (
    render_event_log,
    render_help_overlay,
    render_hud,
    render_map,
    render_wind_arrow,
)
from render.config import (
    COLOR_BG_DARK,
    FONT_SIZE,
    LOG_PANEL_HEIGHT,
    MAP_MARGIN,
    MAP_SIZE,
    SIDEBAR_X,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
)


def render_to_virtual_screen(
    virtual_screen: pygame.Surface,
    font,
    state: SimulationState,
    show_help: bool,
) -> None:
    """Render everything to the virtual screen at fixed resolution."""
    virtual_screen.fill(COLOR_BG_DARK)

    map_rect = pygame.Rect(MAP_MARGIN, (VIRTUAL_HEIGHT - MAP_SIZE) // 2, MAP_SIZE, MAP_SIZE)
    render_map(virtual_screen, state.heightfield, get_frame_output(state), map_rect)

    hud_bottom = render_hud(virtual_screen, font, state, SIDEBAR_X, MAP_MARGIN)
    render_wind_arrow(virtual_screen, state.wind, (SIDEBAR_X + 60, hud_bottom + 60))

    log_pos = (SIDEBAR_X, VIRTUAL_HEIGHT - LOG_PANEL_HEIGHT)
    if show_help:
        render_help_overlay(virtual_screen, font, CONTROL_DESCRIPTIONS, log_pos,
                            VIRTUAL_WIDTH - SIDEBAR_X - MAP_MARGIN, LOG_PANEL_HEIGHT - MAP_MARGIN)
    else:
        render_event_log(virtual_screen, font, state, log_pos, LOG_PANEL_HEIGHT)


def blit_virtual_to_screen(virtual_screen: pygame.Surface, screen: pygame.Surface) -> None:
    """Scale and blit the virtual screen to the actual display, with letterboxing."""
    screen_w, screen_h = screen.get_size()
    scale = min(screen_w / VIRTUAL_WIDTH, screen_h / VIRTUAL_HEIGHT)
    scaled_w = int(VIRTUAL_WIDTH * scale)
    scaled_h = int(VIRTUAL_HEIGHT * scale)
    offset_x = (screen_w - scaled_w) // 2
    offset_y = (screen_h - scaled_h) // 2

    # Fill letterbox areas
    screen.fill((0, 0, 0))

    scaled = pygame.transform.scale(virtual_screen, (scaled_w, scaled_h))
    screen.blit(scaled, (offset_x, offset_y))


def handle_key(state: SimulationState, key: int) -> None:
    """Apply a simulation key press to the state."""
    if key == START_PAUSE_KEY:
        toggle_running(state)
    elif key == RESET_KEY:
        reset(state)
    elif key in WIND_KEYS:
        speed_steps, direction_steps = WIND_KEYS[key]
        adjust_wind(state, speed_steps, direction_steps)


def run(config: SimulationConfig | None = None) -> None:
    """Main viewer loop."""
    pygame.init()

    virtual_screen = pygame.Surface((VIRTUAL_WIDTH, VIRTUAL_HEIGHT))
    screen = pygame.display.set_mode((VIRTUAL_WIDTH, VIRTUAL_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Erg - Aeolian Dunes")

    font = pygame.font.Font(None, FONT_SIZE)
    clock = pygame.time.Clock()

    state = build_initial_state(config)
    state.messages.append("Welcome to Erg. Press Space to start, H for help.")
    show_help = False

    running = True
    while running:
        # Clamp long frames so grains cannot tunnel through the ground
        dt = min(clock.tick(FRAME_RATE) / 1000.0, MAX_FRAME_DT)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue

            if event.type == pygame.KEYDOWN:
                if event.key == QUIT_KEY:
                    running = False
                elif event.key == HELP_KEY:
                    show_help = not show_help
                else:
                    handle_key(state, event.key)

        simulate_tick(state, dt)

        render_to_virtual_screen(virtual_screen, font, state, show_help)
        blit_virtual_to_screen(virtual_screen, screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        sys.exit(0)
