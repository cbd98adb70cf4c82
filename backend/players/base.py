"""
Base player interface for the simulation.
"""

from typing import Set

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input logic.

    A player stands in for the keyboard: once per frame it reports which
    movement keys are held, given the latest game state.
    """

    def get_pressed(self, game_state: GameState) -> Set[str]:
        """
        Return the directions held during this frame.

        Args:
            game_state: Latest snapshot of the simulation

        Returns:
            A set drawn from "UP", "DOWN", "LEFT", "RIGHT" (may be empty)
        """
        raise NotImplementedError
