"""
Random player implementation - presses random safe keys.
"""

import random
from typing import List, Optional, Set

from domain.constants import DIRECTION_DELTAS, VALID_MOVES, opposite
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Presses a random direction that stays on the board and does not reverse.
    With probability hold_probability no key is pressed and the snake keeps
    its heading.
    """

    def __init__(self, hold_probability: float = 0.7, rng: Optional[random.Random] = None):
        if not 0.0 <= hold_probability <= 1.0:
            raise ValueError(f"hold_probability must be within [0, 1], got {hold_probability}")
        self.hold_probability = hold_probability
        self.rng = rng or random.Random()

    def get_pressed(self, game_state: GameState) -> Set[str]:
        if not game_state.snake_positions:
            return set()

        head_x, head_y = game_state.head
        current = game_state.direction
        ahead = DIRECTION_DELTAS[current]
        next_cell = (head_x + ahead[0], head_y + ahead[1])

        # Keep going unless the next cell is off the board
        if self._on_board(next_cell, game_state.grid_size) and self.rng.random() < self.hold_probability:
            return set()

        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == opposite(current):
                continue
            dx, dy = DIRECTION_DELTAS[move]
            if not self._on_board((head_x + dx, head_y + dy), game_state.grid_size):
                continue
            valid_moves.append(move)

        # Boxed in: press nothing, the clamp holds the head in place
        if not valid_moves:
            return set()

        return {self.rng.choice(valid_moves)}

    @staticmethod
    def _on_board(cell, grid_size: int) -> bool:
        x, y = cell
        return 0 <= x < grid_size and 0 <= y < grid_size
