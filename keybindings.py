"""
keybindings.py - Centralized key mappings for Erg (Pygame version)

Single source of truth for all keyboard controls.
"""
from __future__ import annotations

try:
    import pygame
except ImportError:
    # Allow import without pygame for type checking
    pygame = None


def _key(name: str) -> int:
    """Get pygame key constant by name, or placeholder if pygame not loaded."""
    if pygame is None:
        return 0
    return getattr(pygame, f"K_{name}", 0)


# Run state
START_PAUSE_KEY = _key("SPACE")   # idle <-> running
RESET_KEY = _key("r")             # Reseed dunes, back to idle

# Wind input: key -> (speed_steps, direction_steps)
WIND_KEYS = {
    _key("UP"): (1, 0),
    _key("DOWN"): (-1, 0),
    _key("LEFT"): (0, -1),
    _key("RIGHT"): (0, 1),
}

# System keys
QUIT_KEY = _key("ESCAPE")
HELP_KEY = _key("h")

# Control descriptions for help display
CONTROL_DESCRIPTIONS = [
    "Space: start / pause",
    "R: reset dunes",
    "Up/Down: wind speed",
    "Left/Right: wind direction",
    "H: help",
    "Esc: quit",
]
