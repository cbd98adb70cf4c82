"""
Registry for player variants.

Maps variant keys (e.g., 'random', 'idle') to player factories so the CLI
can build a player from a string.
"""

import random
from typing import Callable, Dict, Optional

from .base import Player


def _make_random_player(rng: Optional[random.Random] = None) -> Player:
    from .random_player import RandomPlayer
    return RandomPlayer(rng=rng)


def _make_idle_player(rng: Optional[random.Random] = None) -> Player:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer()


# Registry: maps variant key -> callable that builds the player
PLAYER_VARIANT_LOADERS: Dict[str, Callable[..., Player]] = {
    "random": _make_random_player,
    "idle": _make_idle_player,
}

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def create_player(variant_key: Optional[str] = None, rng: Optional[random.Random] = None) -> Player:
    """
    Build the player for a given variant key.

    Args:
        variant_key: One of 'random', 'idle'. If None or empty, returns 'random'.
        rng: Random source handed to players that need one.

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = "random"

    variant_key = variant_key.strip()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key](rng=rng)


def list_variants() -> list:
    """
    Return metadata about all available player variants.
    """
    return [
        {"key": "random", "description": "Random turns that stay on the board and never reverse"},
        {"key": "idle", "description": "Presses nothing; the snake keeps its heading"},
    ]
