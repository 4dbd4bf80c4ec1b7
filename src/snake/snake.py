# snake.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .enums import Direction, Orientation
from .grid import Cell
from .path import PathEntry, PathHistory

logger = logging.getLogger(__name__)

INITIAL_HEAD: Cell = (0, 3)
INITIAL_DIRECTION = Direction.DOWN
INITIAL_PATH = (
    PathEntry((0, 2), Orientation.VERTICAL),
    PathEntry((0, 1), Orientation.VERTICAL),
    PathEntry((0, 0), Orientation.VERTICAL),
)


@dataclass(frozen=True)
class BodySegment:
    """Stable identity of a body piece; 0 is next to the head, the highest index is the tail."""
    index: int


class Snake:
    def __init__(self, head: Cell, direction: Direction, path: PathHistory, length: int):
        assert len(path) >= length, "path history shorter than the body"
        self.head: Cell = head
        self.direction = direction
        self.pending = direction
        self.path = path
        self.segments: List[BodySegment] = [BodySegment(i) for i in range(length)]
        self.positions: List[Cell] = []
        self.reposition()

    @classmethod
    def initial(cls) -> "Snake":
        """Three segments in column 0 heading down, head at (0, 3)."""
        return cls(INITIAL_HEAD, INITIAL_DIRECTION, PathHistory(INITIAL_PATH), len(INITIAL_PATH))

    # ---------- Input ----------
    def turn(self, direction: Direction) -> bool:
        """
        Latch a direction for the next tick. Turns along the current axis
        (including reversals) are ignored. Returns True if accepted.
        """
        if direction.same_axis(self.direction):
            logger.debug("ignored turn %s while heading %s", direction.name, self.direction.name)
            return False
        self.pending = direction
        return True

    # ---------- Tick ----------
    def move(self) -> None:
        """Advance the head one cell and re-derive every segment position."""
        self.direction = self.pending
        self.path.record_head_departure(self.head, self.direction.orientation)
        hx, hy = self.head
        self.head = (hx + self.direction.dx, hy + self.direction.dy)
        self.reposition()

    def reposition(self) -> None:
        self.positions = [self.path.position_for(seg.index) for seg in self.segments]

    def grow(self) -> BodySegment:
        """Append a tail segment; its path entry was recorded by the move this tick."""
        segment = BodySegment(len(self.segments))
        self.segments.append(segment)
        self.positions.append(self.path.position_for(segment.index))
        return segment

    def trim_path(self) -> None:
        self.path.trim(len(self.segments))

    # ---------- Queries ----------
    def body_cells(self) -> List[Cell]:
        return list(self.positions)

    def occupied_cells(self) -> List[Cell]:
        """Head plus every path entry still referenced by a segment."""
        return [self.head] + self.path.cells(len(self.segments))

    def segment_orientation(self, segment: BodySegment) -> Orientation:
        return self.path.entry_for(segment.index).orientation
