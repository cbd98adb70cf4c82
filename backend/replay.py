"""
Replay files for simulation runs.

A replay is a JSON document:
    {"metadata": {...}, "ticks": [<GameState.to_dict()>, ...]}
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from domain.game_state import GameState

logger = logging.getLogger(__name__)


def serialize_history(history: List[GameState]) -> List[Dict[str, Any]]:
    """
    Convert the list of GameState objects to a JSON-serializable list of dicts.
    """
    return [state.to_dict() for state in history]


def save_replay(
    history: List[GameState],
    path: str,
    metadata: Optional[Dict[str, Any]] = None
) -> str:
    data = {
        "metadata": metadata or {},
        "ticks": serialize_history(history),
    }

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    logger.info(f"Saved replay with {len(history)} ticks to {path}")
    return path


def load_replay(path: str) -> Tuple[Dict[str, Any], List[GameState]]:
    """
    Load a replay written by save_replay().

    Returns:
        (metadata, list of GameState)

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a replay.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Replay file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, dict) or "ticks" not in data:
        raise ValueError(f"{path} is not a replay file (missing 'ticks').")

    ticks = [GameState.from_dict(record) for record in data["ticks"]]
    logger.info(f"Loaded replay with {len(ticks)} ticks")
    return data.get("metadata", {}), ticks
