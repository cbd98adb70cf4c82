"""
Grid cell to pixel projection shared by renderers.

Cell ORIGIN_CELL sits at the window centre; positions are clamped so a
sprite never leaves the window.
"""

from typing import Tuple

from domain.constants import CELL_SIZE, WINDOW_SIZE, ORIGIN_CELL


def to_pixel(
    location: Tuple[int, int],
    cell_size: float = CELL_SIZE,
    window_size: float = WINDOW_SIZE,
    origin: int = ORIGIN_CELL
) -> Tuple[float, float]:
    """Return the pixel-space centre of a grid cell."""
    limit = window_size / 2 - cell_size / 2
    x, y = location
    px = max(-limit, min(limit, (x - origin) * cell_size))
    py = max(-limit, min(limit, (y - origin) * cell_size))
    return (float(px), float(py))
