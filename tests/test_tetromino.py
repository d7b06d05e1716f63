import pytest

from termtris.tetromino import (
    SHAPE_COUNT,
    Shape,
    Tetromino,
    TetrominoType,
    rotate,
    shape,
    shape_blocks,
)


def test_catalogue_has_seven_four_cell_shapes():
    assert SHAPE_COUNT == len(TetrominoType) == 7
    for index in range(SHAPE_COUNT):
        state = shape(index)
        assert len(state.cells) == 4
        assert len(set(state.cells)) == 4
        assert all(0 <= cell < state.width * state.height for cell in state.cells)


def test_unknown_shape_index_rejected():
    with pytest.raises(ValueError):
        shape(7)
    with pytest.raises(ValueError):
        shape(-1)


@pytest.mark.parametrize("index", range(7))
def test_four_rotations_return_original(index):
    original = shape(index)
    state = original
    for _ in range(4):
        state = rotate(state)
    assert state == original


def test_rotate_swaps_dimensions_and_is_pure():
    t_piece = shape(5)
    turned = rotate(t_piece)
    assert (turned.width, turned.height) == (t_piece.height, t_piece.width)
    # XXX / .X.  turns into  .X / XX / .X
    assert turned == Shape(2, 3, (1, 2, 3, 5))
    assert t_piece == Shape(3, 2, (0, 1, 2, 4))


def test_i_piece_turns_vertical():
    assert rotate(shape(0)) == Shape(1, 4, (0, 1, 2, 3))


def test_shape_blocks_wraps_rotation():
    assert shape_blocks(2, 5) == shape_blocks(2, 1)
    assert shape_blocks(2, -1) == shape_blocks(2, 3)


def test_tetromino_rotate_and_move():
    piece = Tetromino(2, x=3, y=-2)
    assert piece.type is TetrominoType.L
    assert piece.width == 3
    for _ in range(5):
        piece.rotate()
    assert piece.rotation == 1
    assert piece.width == 2
    piece.move(-1, 2)
    assert (piece.x, piece.y) == (2, 0)
