"""Simulation state management module."""

from game_state.state import SimulationState
from game_state.initialization import build_initial_state, reseed_state

__all__ = [
    'SimulationState',
    'build_initial_state',
    'reseed_state',
]
