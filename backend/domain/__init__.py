"""
Domain entities for the grid snake simulation.

This module contains the core entities that are independent of
the host engine (rendering, windowing, input devices).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, INPUT_PRIORITY,
    DIRECTION_DELTAS, OPPOSITES, GRID_SIZE, CLAMP_MAX, opposite,
)
from .snake import Segment, Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'INPUT_PRIORITY',
    'DIRECTION_DELTAS', 'OPPOSITES', 'GRID_SIZE', 'CLAMP_MAX', 'opposite',
    'Segment', 'Snake',
    'GameState',
]
