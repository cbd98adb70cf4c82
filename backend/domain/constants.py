"""
Game constants for the grid snake simulation.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# First held key wins when several are pressed in the same frame
INPUT_PRIORITY = (UP, LEFT, DOWN, RIGHT)

# (0,0) is bottom left, so UP => y + 1
DIRECTION_DELTAS = {
    UP:    (0, 1),
    DOWN:  (0, -1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Board settings
GRID_SIZE = 15
# Head clamp bound. Cells run 0..GRID_SIZE-1 but the clamp allows GRID_SIZE.
CLAMP_MAX = 15
START_HEAD = (8, 8)
START_BODY = (8, 7)
START_DIRECTION = UP

# Timing (simulated seconds)
MOVE_INTERVAL = 0.35
FOOD_INTERVAL = 1.0

# Rendering projection
CELL_SIZE = 20
WINDOW_SIZE = 300
ORIGIN_CELL = 8


def opposite(direction: str) -> str:
    """Return the direction pointing the other way."""
    try:
        return OPPOSITES[direction]
    except KeyError:
        raise ValueError(
            f"Unknown direction '{direction}'. Valid directions: {', '.join(INPUT_PRIORITY)}"
        ) from None
