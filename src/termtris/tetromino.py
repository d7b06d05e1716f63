"""Tetromino catalogue and the active falling piece.

Shapes are stored as a bounding box plus the row-major indices of the four
occupied cells inside it.  Rotations are derived from the spawn orientation
by :func:`rotate`, which never mutates its argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List, Tuple


class TetrominoType(str, Enum):
    """The seven shapes, in catalogue index order."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


@dataclass(frozen=True)
class Shape:
    """Immutable piece template.

    ``cells`` holds the row-major indices (``row * width + col``) of the four
    occupied cells within a ``width`` x ``height`` bounding box.
    """

    width: int
    height: int
    cells: Tuple[int, ...]

    def offsets(self) -> List[Tuple[int, int]]:
        """Return the occupied cells as ``(row, col)`` pairs."""

        return [divmod(index, self.width) for index in self.cells]


# Spawn orientations, indexed like ``TetrominoType``.
_BASE_SHAPES: Tuple[Shape, ...] = (
    Shape(4, 1, (0, 1, 2, 3)),  # I
    Shape(3, 2, (0, 3, 4, 5)),  # J
    Shape(3, 2, (2, 3, 4, 5)),  # L
    Shape(2, 2, (0, 1, 2, 3)),  # O
    Shape(3, 2, (1, 2, 3, 4)),  # S
    Shape(3, 2, (0, 1, 2, 4)),  # T
    Shape(3, 2, (0, 1, 4, 5)),  # Z
)

SHAPE_COUNT = len(_BASE_SHAPES)
ROTATIONS = 4


def shape(index: int) -> Shape:
    """Return the spawn orientation of catalogue entry ``index`` (0..6)."""

    if not 0 <= index < SHAPE_COUNT:
        raise ValueError(f"Unknown shape index: {index}")
    return _BASE_SHAPES[index]


def rotate(state: Shape) -> Shape:
    """Return ``state`` rotated 90 degrees clockwise.

    Cell ``(row, col)`` of an ``h`` x ``w`` box moves to ``(col, h - 1 - row)``
    of the resulting ``w`` x ``h`` box.  The new indices are renumbered against
    the new width, so the result is again in row-major form.
    """

    new_width = state.height
    cells = sorted(
        col * new_width + (state.height - 1 - row) for row, col in state.offsets()
    )
    return Shape(new_width, state.width, tuple(cells))


@lru_cache(maxsize=None)
def shape_blocks(index: int, rotation: int) -> Shape:
    """Return shape ``index`` rotated ``rotation`` times clockwise.

    Any integer rotation is accepted; it is wrapped to the four orientations.
    """

    state = shape(index)
    for _ in range(rotation % ROTATIONS):
        state = rotate(state)
    return state


@dataclass
class Tetromino:
    """Active falling piece in the game.

    ``x``/``y`` locate the top-left corner of the rotated bounding box on the
    board.  ``y`` is negative while the piece is still entering from above.
    """

    kind: int
    rotation: int = 0
    x: int = 0
    y: int = 0

    @property
    def type(self) -> TetrominoType:
        return list(TetrominoType)[self.kind]

    @property
    def shape(self) -> Shape:
        return shape_blocks(self.kind, self.rotation)

    @property
    def width(self) -> int:
        return self.shape.width

    def rotate(self) -> None:
        """Turn the piece a quarter clockwise."""

        self.rotation = (self.rotation + 1) % ROTATIONS

    def move(self, dx: int, dy: int) -> None:
        """Move the piece by ``dx`` columns and ``dy`` rows."""

        self.x += dx
        self.y += dy
