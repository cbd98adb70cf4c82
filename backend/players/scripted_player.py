"""
Scripted player - replays a fixed sequence of key sets, one per frame.
"""

from typing import Iterable, List, Set

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns script[i] on the i-th frame and nothing once the script runs out.
    """

    def __init__(self, script: Iterable[Iterable[str]] = ()):
        self.script: List[Set[str]] = []
        for keys in script:
            frame = set(keys)
            unknown = frame - VALID_MOVES
            if unknown:
                raise ValueError(f"Unknown direction(s) in script: {sorted(unknown)}")
            self.script.append(frame)
        self.frame = 0

    def get_pressed(self, game_state: GameState) -> Set[str]:
        if self.frame >= len(self.script):
            return set()
        pressed = self.script[self.frame]
        self.frame += 1
        return set(pressed)
