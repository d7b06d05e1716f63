"""Board representation for the playfield."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
from numpy.typing import NDArray


# The board size is fixed; nothing in the game resizes it.
WIDTH = 10
HEIGHT = 10

Grid = NDArray[np.bool_]


def create_empty_grid() -> Grid:
    """Return a new empty board grid, indexed ``[row, col]``."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.bool_)


class Board:
    """Fixed-size occupancy grid holding the locked cells."""

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at column ``x``, row ``y`` is blocked.

        Columns outside the board and rows at or below the floor count as
        occupied so that walls and floor act like locked cells during
        collision checks.  Rows above the board (``y < 0``) are open.
        """

        if not 0 <= x < self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return bool(self.grid[y, x])

    def merge(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Mark every in-range ``(x, y)`` of ``cells`` as occupied."""

        for x, y in cells:
            if 0 <= x < self.width and 0 <= y < self.height:
                self.grid[y, x] = True

    def clear_completed_lines(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are visited top to bottom by index.  A full row is removed on the
        spot by shifting everything above it down one row and emptying row 0,
        so the visit of a later row sees the already shifted grid.
        """

        cleared = 0
        for y in range(self.height):
            if self.grid[y].all():
                self.grid[1 : y + 1] = self.grid[:y].copy()
                self.grid[0] = False
                cleared += 1
        return cleared

    def clear(self) -> None:
        """Empty every cell."""

        self.grid[:] = False

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))
