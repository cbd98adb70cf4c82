"""
Runtime settings for the snake simulation.

Values come from the environment (a local .env file is loaded first) and
fall back to the defaults in domain.constants.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import GRID_SIZE, CLAMP_MAX, MOVE_INTERVAL, FOOD_INTERVAL


@dataclass
class SimulationSettings:
    grid_size: int = GRID_SIZE
    clamp_max: int = CLAMP_MAX
    move_interval: float = MOVE_INTERVAL
    food_interval: float = FOOD_INTERVAL
    seed: Optional[int] = None
    log_level: str = "INFO"

    def validate(self) -> "SimulationSettings":
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.clamp_max < 0:
            raise ValueError(f"clamp_max must not be negative, got {self.clamp_max}")
        if self.move_interval <= 0:
            raise ValueError(f"move_interval must be positive, got {self.move_interval}")
        if self.food_interval <= 0:
            raise ValueError(f"food_interval must be positive, got {self.food_interval}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(
                f"SNAKE_LOG_LEVEL must be a logging level name, got '{self.log_level}'"
            )
        return self


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'") from None


def load_settings(env_file: Optional[str] = None) -> SimulationSettings:
    """
    Build settings from SNAKE_* environment variables.

    Args:
        env_file: Optional path to a dotenv file. Existing environment
                  variables take precedence over the file.

    Returns:
        Validated SimulationSettings.

    Raises:
        ValueError: If a variable cannot be parsed or is out of range.
    """
    load_dotenv(env_file)

    settings = SimulationSettings(
        grid_size=_env_int("SNAKE_GRID_SIZE", GRID_SIZE),
        clamp_max=_env_int("SNAKE_CLAMP_MAX", CLAMP_MAX),
        move_interval=_env_float("SNAKE_MOVE_INTERVAL", MOVE_INTERVAL),
        food_interval=_env_float("SNAKE_FOOD_INTERVAL", FOOD_INTERVAL),
        seed=_env_int("SNAKE_SEED", None),
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
    )
    return settings.validate()
