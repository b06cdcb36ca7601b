"""
utils.py - Common utility functions for Erg

Provides shared, stateless helper functions used across different modules.
"""
from __future__ import annotations


def clamp(val: float, low: float, high: float) -> float:
    """Clamp a value between low and high bounds."""
    return max(low, min(high, val))


def parse_step(token: str) -> int:
    """Parse a '+'/'-' style step token ('+', '-', '++', '+3', '-2').

    Raises:
        ValueError: if the token is not a valid step.
    """
    token = token.strip()
    if token and set(token) <= {"+"}:
        return len(token)
    if token and set(token) <= {"-"}:
        return -len(token)
    return int(token)
