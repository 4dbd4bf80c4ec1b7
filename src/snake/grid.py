from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np  # type: ignore

from .enums import CellState

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Fixed-size board; cells are (x, y) with 0 <= x < width, 0 <= y < height."""
    width: int
    height: int

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def random_cell(self, rng: np.random.Generator) -> Cell:
        return (int(rng.integers(self.width)), int(rng.integers(self.height)))

    def board(
        self,
        head: Optional[Cell],
        body: Iterable[Cell],
        food: Optional[Cell],
    ) -> np.ndarray:
        """
        Occupancy array indexed [y, x] with CellState values.
        Off-grid cells are skipped; the head is painted last so it wins a tie.
        """
        board = np.full((self.height, self.width), CellState.EMPTY, dtype=np.int8)
        if food is not None and self.contains(food):
            board[food[1], food[0]] = CellState.FOOD
        for cell in body:
            if self.contains(cell):
                board[cell[1], cell[0]] = CellState.BODY
        if head is not None and self.contains(head):
            board[head[1], head[0]] = CellState.HEAD
        return board
