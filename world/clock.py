# world/clock.py
"""
Simulation clocks for Erg.

Two clocks advance together:
- the frame clock follows the variable frame delta (grains, avalanche)
- the fixed-step clock accumulates frame time and fires wind tracer sub-steps
"""
from __future__ import annotations

from dataclasses import dataclass

from config import TRACER_INTERVAL


@dataclass
class SimulationClock:
    """
    Frame clock plus accumulator-gated fixed-step clock.

    The accumulator is reset to zero (not decremented) when a sub-step fires,
    so at most one sub-step runs per frame.
    """
    step_interval: float = TRACER_INTERVAL
    elapsed: float = 0.0
    frame_count: int = 0
    accumulator: float = 0.0
    step_count: int = 0

    def advance(self, dt: float) -> bool:
        """
        Advance both clocks by one frame.

        Returns True when the fixed-step clock fires this frame.
        """
        self.elapsed += dt
        self.frame_count += 1
        self.accumulator += dt
        if self.accumulator >= self.step_interval:
            self.accumulator = 0.0
            self.step_count += 1
            return True
        return False

    def reset(self) -> None:
        self.elapsed = 0.0
        self.frame_count = 0
        self.accumulator = 0.0
        self.step_count = 0
