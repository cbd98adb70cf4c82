"""
Tests for scheduler.py - fixed-timestep gates and frame ordering.
"""

import pytest
import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT
from scheduler import FixedTimestep, FrameLoop
from simulation import SnakeSimulation


class TestFixedTimestep:
    """Tests for the FixedTimestep gate."""

    def test_fires_once_per_step(self):
        """0.35s in one frame fires exactly one step."""
        gate = FixedTimestep(0.35)
        assert gate.advance(0.35) == 1

    def test_accumulates_small_frames(self):
        """Frames shorter than the step accumulate until one fires."""
        gate = FixedTimestep(0.35)
        assert gate.advance(0.2) == 0
        assert gate.advance(0.2) == 1
        assert gate.accumulator == pytest.approx(0.05)

    def test_long_frame_fires_repeatedly(self):
        """A 0.7s frame fires two steps."""
        gate = FixedTimestep(0.35)
        assert gate.advance(0.7) == 2

    def test_sixty_fps_for_one_second(self):
        """60 frames of 1/60s fire the 1.0s gate exactly once."""
        gate = FixedTimestep(1.0)
        fired = sum(gate.advance(1.0 / 60) for _ in range(60))
        assert fired == 1

    def test_invalid_step_raises(self):
        """Non-positive steps are rejected."""
        with pytest.raises(ValueError):
            FixedTimestep(0)

    def test_negative_delta_raises(self):
        """Time cannot run backwards."""
        gate = FixedTimestep(0.35)
        with pytest.raises(ValueError):
            gate.advance(-0.1)


class TestFrameLoop:
    """Tests for FrameLoop ordering."""

    def test_no_tick_before_interval(self):
        """A short frame only resolves input."""
        sim = SnakeSimulation()
        loop = FrameLoop(sim, 0.35, 1.0)
        ticks = loop.advance(0.1, {LEFT})

        assert ticks == []
        assert sim.direction == LEFT
        assert sim.snake.head == (8, 8)

    def test_input_applies_before_movement_in_same_frame(self):
        """The key held on the frame a tick fires steers that tick."""
        sim = SnakeSimulation()
        loop = FrameLoop(sim, 0.35, 1.0)
        ticks = loop.advance(0.35, {LEFT})

        assert len(ticks) == 1
        assert sim.snake.positions == [(7, 8), (8, 8)]

    def test_reversal_rejected_in_frame(self):
        """Holding DOWN while heading UP keeps moving UP."""
        sim = SnakeSimulation()
        loop = FrameLoop(sim, 0.35, 1.0)
        loop.advance(0.35, {DOWN})
        assert sim.direction == UP
        assert sim.snake.head == (8, 9)

    def test_food_spawns_on_its_own_cadence(self):
        """Three 0.35s frames give three ticks and one food."""
        sim = SnakeSimulation(seed=1)
        loop = FrameLoop(sim, 0.35, 1.0)
        total_ticks = 0
        for _ in range(3):
            total_ticks += len(loop.advance(0.35))

        assert total_ticks == 3
        assert len(sim.food) == 1
        assert loop.frame_number == 3
        assert loop.elapsed == pytest.approx(1.05)

    def test_food_spawned_after_ticks(self):
        """Food spawned in a frame is not eaten by that frame's tick."""
        sim = SnakeSimulation()
        sim.spawn_food = Mock(side_effect=lambda: sim.food.append((8, 9)))
        loop = FrameLoop(sim, 1.0, 1.0)

        loop.advance(1.0)
        assert sim.food == [(8, 9)]
        assert sim.snake.head == (8, 9)

        # The next tick moves past it without eating
        loop.advance(1.0)
        assert sim.food_eaten == 0

    def test_eaten_food_grows_snake_through_loop(self):
        """Food in the snake's path is eaten and grows it on the same tick."""
        sim = SnakeSimulation()
        sim.set_food([(8, 10)])
        loop = FrameLoop(sim, 0.35, 100.0)

        loop.advance(0.35)
        ticks = loop.advance(0.35)

        assert ticks[-1].snake_positions == [(8, 10), (8, 9), (8, 8)]
        assert sim.food == []

    def test_negative_delta_raises(self):
        """A negative frame delta raises ValueError."""
        loop = FrameLoop(SnakeSimulation(), 0.35, 1.0)
        with pytest.raises(ValueError):
            loop.advance(-1.0)
