from __future__ import annotations

import numpy as np

from termtris.board import HEIGHT, WIDTH, Board


def test_walls_and_floor_are_occupied() -> None:
    board = Board()
    assert board.is_occupied(-1, 0)
    assert board.is_occupied(WIDTH, 0)
    assert board.is_occupied(0, HEIGHT)
    assert not board.is_occupied(0, -3)
    assert not board.is_occupied(WIDTH - 1, HEIGHT - 1)


def test_merge_skips_cells_outside_board() -> None:
    board = Board()
    board.merge([(0, 0), (9, 9), (3, -1), (10, 2)])
    assert board.is_occupied(0, 0)
    assert board.is_occupied(9, 9)
    assert board.occupied_count() == 2


def test_clear_single_row_shifts_rows_above() -> None:
    board = Board()
    board.grid[HEIGHT - 1] = True
    board.grid[HEIGHT - 2, 3] = True
    board.grid[0, 7] = True
    before = board.grid.copy()

    cleared = board.clear_completed_lines()

    assert cleared == 1
    assert not board.grid[0].any()
    assert np.array_equal(board.grid[1:HEIGHT], before[0 : HEIGHT - 1])
    assert board.grid[HEIGHT - 1, 3]
    assert board.occupied_count() == 2


def test_clear_multiple_rows_in_one_pass() -> None:
    board = Board()
    board.grid[5] = True
    board.grid[8] = True
    board.grid[9] = True
    board.grid[4, 0] = True

    assert board.clear_completed_lines() == 3
    assert board.occupied_count() == 1
    # Row 4 moved down once per cleared row.
    assert board.grid[7, 0]


def test_clear_without_full_rows_changes_nothing() -> None:
    board = Board()
    board.grid[HEIGHT - 1, :-1] = True
    before = board.grid.copy()
    assert board.clear_completed_lines() == 0
    assert np.array_equal(board.grid, before)


def test_clear_empties_board() -> None:
    board = Board()
    board.grid[2:6] = True
    board.clear()
    assert board.occupied_count() == 0
