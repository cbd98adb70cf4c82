"""
Player implementations for the snake simulation.

Players stand in for the input device: each frame they report which
movement keys are held.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .variant_registry import create_player, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'create_player',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
