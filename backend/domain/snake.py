"""
Snake entity for the simulation.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class Segment:
    """One body part. The location lives on the record itself."""
    segment_id: int
    location: Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        segments: list of Segment from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.segments: List[Segment] = []
        self._next_id = 0
        for position in positions:
            self.append(position)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.segments[0].location

    @property
    def tail(self) -> Tuple[int, int]:
        return self.segments[-1].location

    @property
    def segment_ids(self) -> List[int]:
        return [segment.segment_id for segment in self.segments]

    @property
    def positions(self) -> List[Tuple[int, int]]:
        """Locations of every segment in chain order."""
        return [segment.location for segment in self.segments]

    def append(self, location: Tuple[int, int]) -> Segment:
        """Add a new segment behind the current tail."""
        segment = Segment(segment_id=self._next_id, location=tuple(location))
        self._next_id += 1
        self.segments.append(segment)
        return segment

    def __len__(self) -> int:
        return len(self.segments)
