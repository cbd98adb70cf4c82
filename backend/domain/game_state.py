"""
GameState entity - a snapshot of the simulation at a point in time.
"""

from typing import List, Tuple, Optional


class GameState:
    """
    A snapshot of the simulation after a specific tick.

    Attributes:
        tick_number: how many movement ticks have run
        direction: the head's current direction
        snake_positions: list of (x, y) from head to tail
        food: list of (x, y) positions of all food on the board
        tail_end: pre-move tail location from the latest tick, if any
        pending_growth: growth events queued but not yet consumed
        grid_size: board dimension on each axis
        segment_ids: id of each segment, parallel to snake_positions
    """

    def __init__(
        self,
        tick_number: int,
        direction: str,
        snake_positions: List[Tuple[int, int]],
        food: List[Tuple[int, int]],
        grid_size: int,
        tail_end: Optional[Tuple[int, int]] = None,
        pending_growth: int = 0,
        segment_ids: Optional[List[int]] = None
    ):
        self.tick_number = tick_number
        self.direction = direction
        self.snake_positions = snake_positions
        self.food = food
        self.grid_size = grid_size
        self.tail_end = tail_end
        self.pending_growth = pending_growth
        self.segment_ids = segment_ids if segment_ids is not None else list(range(len(snake_positions)))

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        T = snake body
        H = snake head
        (0,0) is at bottom left and x-axis labels are at the bottom.
        Cells outside the grid (reachable through the clamp bound) are skipped.
        """
        size = self.grid_size
        board = [['.' for _ in range(size)] for _ in range(size)]

        def _place(cell, mark):
            x, y = cell
            if 0 <= x < size and 0 <= y < size:
                board[y][x] = mark

        for cell in self.food:
            _place(cell, 'F')

        # Body first so the head wins when segments overlap
        for cell in self.snake_positions[1:]:
            _place(cell, 'T')
        if self.snake_positions:
            _place(self.head, 'H')

        result = []
        # Print rows in reverse order (bottom to top)
        for y in range(size - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(size)))

        return "\n".join(result)

    def to_dict(self) -> dict:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "tick_number": self.tick_number,
            "direction": self.direction,
            "snake_positions": [list(p) for p in self.snake_positions],
            "food": [list(p) for p in self.food],
            "grid_size": self.grid_size,
            "tail_end": list(self.tail_end) if self.tail_end is not None else None,
            "pending_growth": self.pending_growth,
            "segment_ids": list(self.segment_ids),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameState":
        try:
            tail_end = data.get("tail_end")
            return cls(
                tick_number=data["tick_number"],
                direction=data["direction"],
                snake_positions=[tuple(p) for p in data["snake_positions"]],
                food=[tuple(p) for p in data["food"]],
                grid_size=data["grid_size"],
                tail_end=tuple(tail_end) if tail_end is not None else None,
                pending_growth=data.get("pending_growth", 0),
                segment_ids=data.get("segment_ids"),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed game state record: {e}") from e

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, direction={self.direction}, "
            f"length={len(self.snake_positions)}, food={self.food}>"
        )
