# path.py
from dataclasses import dataclass
from typing import Iterable, List

from .enums import Orientation
from .grid import Cell


@dataclass(frozen=True)
class PathEntry:
    cell: Cell
    orientation: Orientation


class PathHistory:
    """
    Cells the head has left, newest first.

    Body segments never store a position of their own: segment i sits wherever
    the head was i+1 ticks ago, i.e. at entries[i]. Growing the snake is then
    just a matter of referencing one more (already recorded) entry.
    """

    def __init__(self, entries: Iterable[PathEntry] = ()):
        self._entries: List[PathEntry] = list(entries)

    def record_head_departure(self, cell: Cell, orientation: Orientation) -> None:
        self._entries.insert(0, PathEntry(cell, orientation))

    def position_for(self, segment_index: int) -> Cell:
        return self.entry_for(segment_index).cell

    def entry_for(self, segment_index: int) -> PathEntry:
        assert 0 <= segment_index < len(self._entries), (
            f"segment {segment_index} has no path entry (history length {len(self._entries)})"
        )
        return self._entries[segment_index]

    def trim(self, keep: int) -> None:
        """Drop entries beyond the first `keep`; never grows the buffer."""
        del self._entries[keep:]

    def cells(self, limit: int | None = None) -> List[Cell]:
        entries = self._entries if limit is None else self._entries[:limit]
        return [e.cell for e in entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> PathEntry:
        return self._entries[index]
