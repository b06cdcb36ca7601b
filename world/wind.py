# world/wind.py
"""
Global wind for Erg.

A single heading and speed shared by the tracer and grain systems. Only
external input (keys, commands) changes it; the particle systems read it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

TWO_PI = 2 * math.pi


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into [0, 2*pi)."""
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0:
        wrapped += TWO_PI
    # fmod can land exactly on 2*pi after the correction for tiny negatives
    return 0.0 if wrapped >= TWO_PI else wrapped


@dataclass
class WindState:
    """Wind heading (radians, 0 = +x, increasing toward +z) and speed."""
    direction: float = 0.0
    speed: float = 0.0

    def __post_init__(self) -> None:
        self.direction = wrap_angle(self.direction)
        self.speed = max(0.0, self.speed)

    def adjust_speed(self, delta: float) -> float:
        """Add delta to the speed, clamped at zero. Returns the new speed."""
        self.speed = max(0.0, self.speed + delta)
        return self.speed

    def adjust_direction(self, delta: float) -> float:
        """Rotate the heading by delta radians. Returns the new heading."""
        self.direction = wrap_angle(self.direction + delta)
        return self.direction

    @property
    def unit_vector(self) -> Tuple[float, float]:
        """(x, z) components of the heading."""
        return math.cos(self.direction), math.sin(self.direction)

    @property
    def perpendicular(self) -> Tuple[float, float]:
        """(x, z) unit vector 90 degrees counter-clockwise of the heading."""
        ux, uz = self.unit_vector
        return -uz, ux

    @property
    def velocity(self) -> Tuple[float, float]:
        """(x, z) wind velocity."""
        ux, uz = self.unit_vector
        return ux * self.speed, uz * self.speed

    @property
    def degrees(self) -> float:
        return math.degrees(self.direction)
