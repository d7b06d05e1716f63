"""Collision and placement helpers for the engine."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .board import HEIGHT, WIDTH, Board, Grid
from .tetromino import Tetromino


def piece_cells(piece: Tetromino) -> List[Tuple[int, int]]:
    """Return the absolute ``(x, y)`` board cells covered by ``piece``.

    Each local cell is turned into a flat board index using the board width as
    the row stride and then split back into column and row.  A cell pushed
    past the right wall (possible after an unchecked rotation) therefore
    continues on the following row instead of leaving the board.
    """

    state = piece.shape
    cells = []
    for local_row, local_col in state.offsets():
        index = (local_row + piece.y) * WIDTH + (local_col + piece.x)
        y, x = divmod(index, WIDTH)
        cells.append((x, y))
    return cells


def would_collide_below(board: Board, piece: Tetromino) -> bool:
    """Return ``True`` if ``piece`` cannot move one row down.

    The same check decides whether gravity may advance the piece and whether
    the piece has to lock in place.
    """

    for x, y in piece_cells(piece):
        if y + 1 >= HEIGHT or board.is_occupied(x, y + 1):
            return True
    return False


def fits_horizontally(piece: Tetromino, dx: int) -> bool:
    """Return ``True`` if shifting by ``dx`` does not cross the wall ahead.

    Only the edge the piece moves toward is checked, so a piece left past the
    right wall by a rotation can still move back left.
    """

    left = piece.x + dx
    if dx < 0:
        return left >= 0
    if dx > 0:
        return left + piece.width <= WIDTH
    return True


def render_grid(board: Board, active: Optional[Tetromino] = None) -> Grid:
    """Return a copy of the board grid with the active piece overlaid.

    Cells of the piece that are still above the board are left out.  The
    board itself is not touched.
    """

    grid = board.grid.copy()
    if active is not None:
        for x, y in piece_cells(active):
            if 0 <= x < board.width and 0 <= y < board.height:
                grid[y, x] = True
    return grid
