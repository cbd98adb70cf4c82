"""
Core grid snake simulation.

Owns the head direction, the segment chain, the food on the board and the
pending growth counter. The host loop (see scheduler.FrameLoop) calls
change_direction() once per frame and run_tick() / spawn_food() whenever
their fixed-interval gates fire.
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple

from domain.constants import (
    CLAMP_MAX,
    DIRECTION_DELTAS,
    GRID_SIZE,
    INPUT_PRIORITY,
    START_BODY,
    START_DIRECTION,
    START_HEAD,
    VALID_MOVES,
    opposite,
)
from domain.game_state import GameState
from domain.snake import Segment, Snake

logger = logging.getLogger(__name__)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class SnakeSimulation:
    """
    Manages:
      - Head direction
      - Snake segments (head first)
      - Food cells
      - TailEnd and pending growth
      - History of per-tick snapshots
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        clamp_max: int = CLAMP_MAX,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        start_positions: Optional[List[Tuple[int, int]]] = None,
        direction: str = START_DIRECTION
    ):
        if grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {grid_size}")
        if clamp_max < 0:
            raise ValueError(f"clamp_max must not be negative, got {clamp_max}")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{direction}'.")

        self.grid_size = grid_size
        self.clamp_max = clamp_max
        self.rng = rng or random.Random(seed)

        self.snake: Optional[Snake] = None
        self.direction = direction
        self.food: List[Tuple[int, int]] = []
        self.tail_end: Optional[Tuple[int, int]] = None
        self.pending_growth = 0

        self.tick_number = 0
        self.food_eaten = 0
        self.history: List[GameState] = []

        if start_positions is None:
            start_positions = [START_HEAD, START_BODY]
        self.setup(start_positions)

    def setup(self, positions: List[Tuple[int, int]]):
        """Create the head and initial body segments."""
        if len(positions) < 2:
            raise ValueError("The snake starts with a head and at least one body segment.")
        self.snake = Snake(positions)
        logger.debug(f"Spawned snake at {self.snake.positions} heading {self.direction}")

    @property
    def has_head(self) -> bool:
        return self.snake is not None and len(self.snake) > 0

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def change_direction(self, pressed: Iterable[str]) -> Optional[str]:
        """
        Resolve this frame's held keys into the head direction.

        The first held key in UP, LEFT, DOWN, RIGHT order is the candidate;
        with nothing held the current direction is kept. A candidate that
        reverses the current direction is ignored.

        Returns:
            The direction after resolution, or None when there is no head.
        """
        if not self.has_head:
            logger.debug("change_direction: no head, skipping")
            return None

        held = set(pressed)
        candidate = next((d for d in INPUT_PRIORITY if d in held), self.direction)

        if candidate != opposite(self.direction):
            self.direction = candidate
        return self.direction

    # ------------------------------------------------------------------
    # Tick steps
    # ------------------------------------------------------------------

    def move_head(self) -> bool:
        """
        Advance the head one cell and pull every other segment into the
        cell its predecessor occupied before the move.

        Returns:
            True if the snake moved, False when there is no head.
        """
        if not self.has_head:
            logger.debug("move_head: no head, skipping")
            return False

        segments = self.snake.segments
        locs = [segment.location for segment in segments]
        self.tail_end = locs[-1]

        dx, dy = DIRECTION_DELTAS[self.direction]
        hx, hy = locs[0]
        # Only the moving axis is clamped
        if dx:
            hx = _clamp(hx + dx, 0, self.clamp_max)
        if dy:
            hy = _clamp(hy + dy, 0, self.clamp_max)
        segments[0].location = (hx, hy)

        for i in range(1, len(segments)):
            segments[i].location = locs[i - 1]

        logger.debug(f"Moved {self.direction}: head {locs[0]} -> {(hx, hy)}")
        return True

    def eat(self) -> int:
        """
        Remove every food on the head's cell, queueing one growth event each.

        Returns:
            Number of food items eaten.
        """
        if not self.has_head:
            return 0

        head = self.snake.head
        remaining = [cell for cell in self.food if cell != head]
        eaten = len(self.food) - len(remaining)
        if eaten:
            self.food = remaining
            self.pending_growth += eaten
            self.food_eaten += eaten
            logger.info(f"Ate {eaten} food at {head} (total {self.food_eaten})")
        return eaten

    def grow(self) -> Optional[Segment]:
        """
        Consume queued growth: append one segment at TailEnd.

        At most one segment is added per call; any other queued events are
        dropped.
        """
        if self.pending_growth <= 0:
            return None
        self.pending_growth = 0

        if not self.has_head or self.tail_end is None:
            return None

        segment = self.snake.append(self.tail_end)
        logger.info(f"Grew to length {len(self.snake)} at {segment.location}")
        return segment

    def run_tick(self) -> GameState:
        """
        Execute one movement tick:
          1) Move the head and shift the chain
          2) Eat any food under the head
          3) Grow from queued events
        """
        self.move_head()
        self.eat()
        self.grow()
        self.tick_number += 1
        return self.record_history()

    # ------------------------------------------------------------------
    # Food
    # ------------------------------------------------------------------

    def spawn_food(self) -> Tuple[int, int]:
        """
        Place one food on a uniformly random cell. Existing food and the
        snake's body are not checked.
        """
        cell = (self.rng.randrange(self.grid_size), self.rng.randrange(self.grid_size))
        self.food.append(cell)
        logger.debug(f"Spawned food at {cell}")
        return cell

    def set_food(self, food_positions: List[Tuple[int, int]]):
        """
        Replace the food on the board with food at the given positions.
        """
        for (fx, fy) in food_positions:
            if not (0 <= fx < self.grid_size and 0 <= fy < self.grid_size):
                raise ValueError(f"Food out of bounds at {(fx, fy)}.")
        self.food = [tuple(cell) for cell in food_positions]

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            direction=self.direction,
            snake_positions=self.snake.positions if self.has_head else [],
            segment_ids=self.snake.segment_ids if self.has_head else [],
            food=list(self.food),
            grid_size=self.grid_size,
            tail_end=self.tail_end,
            pending_growth=self.pending_growth
        )

    def record_history(self) -> GameState:
        state = self.get_current_state()
        self.history.append(state)
        return state

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")
