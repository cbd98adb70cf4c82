"""
Fixed-timestep gates and the per-frame driver for the simulation.

The host engine normally supplies these; FrameLoop is the headless stand-in
used by the CLI and the tests. Frame order is fixed:
input -> movement ticks (move, eat, grow) -> food spawns.
"""

import logging
from typing import Iterable, List

from domain.game_state import GameState
from simulation import SnakeSimulation

logger = logging.getLogger(__name__)


class FixedTimestep:
    """
    Accumulates frame time and fires once per elapsed step.
    """

    def __init__(self, step: float):
        if step <= 0:
            raise ValueError(f"Timestep must be positive, got {step}")
        self.step = step
        self.accumulator = 0.0

    def advance(self, dt: float) -> int:
        """
        Add dt seconds and return how many steps are due.
        """
        if dt < 0:
            raise ValueError(f"Frame delta must not be negative, got {dt}")
        self.accumulator += dt
        fired = 0
        # Tolerance keeps 0.35 + 0.35 style sums from missing a step
        while self.accumulator + 1e-9 >= self.step:
            self.accumulator -= self.step
            fired += 1
        if self.accumulator < 0:
            self.accumulator = 0.0
        return fired


class FrameLoop:
    """
    Drives a SnakeSimulation one frame at a time.
    """

    def __init__(
        self,
        simulation: SnakeSimulation,
        move_interval: float,
        food_interval: float
    ):
        self.simulation = simulation
        self.move_gate = FixedTimestep(move_interval)
        self.food_gate = FixedTimestep(food_interval)
        self.frame_number = 0
        self.elapsed = 0.0

    def advance(self, dt: float, pressed: Iterable[str] = ()) -> List[GameState]:
        """
        Run a single frame.

        Args:
            dt: seconds since the previous frame
            pressed: directions held during this frame

        Returns:
            Snapshots for each movement tick that fired this frame.
        """
        if dt < 0:
            raise ValueError(f"Frame delta must not be negative, got {dt}")

        self.simulation.change_direction(pressed)

        ticks = []
        for _ in range(self.move_gate.advance(dt)):
            ticks.append(self.simulation.run_tick())

        for _ in range(self.food_gate.advance(dt)):
            self.simulation.spawn_food()

        self.frame_number += 1
        self.elapsed += dt
        if ticks:
            logger.debug(f"Frame {self.frame_number}: {len(ticks)} tick(s) at t={self.elapsed:.2f}s")
        return ticks
