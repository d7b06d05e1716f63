"""Terminal falling-block puzzle engine."""

from .board import HEIGHT, WIDTH, Board
from .config import GameConfig
from .game_state import Command, GameState, Snapshot
from .tetromino import Shape, Tetromino, TetrominoType, rotate, shape, shape_blocks
from .utils import fits_horizontally, piece_cells, render_grid, would_collide_below

__all__ = [
    "Board",
    "Command",
    "GameConfig",
    "GameState",
    "HEIGHT",
    "Shape",
    "Snapshot",
    "Tetromino",
    "TetrominoType",
    "WIDTH",
    "fits_horizontally",
    "piece_cells",
    "render_grid",
    "rotate",
    "shape",
    "shape_blocks",
    "would_collide_below",
]
