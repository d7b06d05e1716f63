"""High level game state container and the per-tick update."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging
import random

from .board import Board, Grid
from .config import GRAVITY_DELAY
from .tetromino import SHAPE_COUNT, Tetromino
from .utils import fits_horizontally, piece_cells, render_grid, would_collide_below


LOGGER = logging.getLogger(__name__)

# The very first piece of a session enters one row lower than later ones.
FIRST_SPAWN_Y = -1
SPAWN_Y = -2


class Command(str, Enum):
    """Decoded player input, at most one per tick."""

    ROTATE = "rotate"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    QUIT = "quit"
    RESTART = "restart"
    NONE = "none"


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only view of one frame: board plus active piece."""

    grid: Grid
    score: int
    game_over: bool


@dataclass
class GameState:
    """Mutable state for one play session.

    The state is owned by the loop that drives it; :meth:`tick` is the only
    entry point that advances the game.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    score: int = 0
    game_over: bool = False
    gravity_counter: int = 0
    gravity_delay: int = GRAVITY_DELAY
    pieces: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        if self.active is None:
            self.spawn_tetromino(FIRST_SPAWN_Y)

    def _random_kind(self) -> int:
        return self.rng.randrange(SHAPE_COUNT)

    def spawn_tetromino(self, y: int = SPAWN_Y) -> Tetromino:
        """Replace the active piece with a random one at the left edge."""

        self.active = Tetromino(self._random_kind(), rotation=0, x=0, y=y)
        LOGGER.debug("Spawned %s at y=%d", self.active.type.value, y)
        return self.active

    def reset_game(self) -> None:
        """Start a new game on an empty board."""

        self.board.clear()
        self.score = 0
        self.game_over = False
        self.gravity_counter = 0
        self.pieces = 0
        self.spawn_tetromino()
        LOGGER.info("Game restarted")

    def snapshot(self) -> Snapshot:
        grid = render_grid(self.board, self.active)
        grid.setflags(write=False)
        return Snapshot(grid=grid, score=self.score, game_over=self.game_over)

    def tick(self, command: Command = Command.NONE) -> Snapshot:
        """Advance the game by one tick and return the frame to draw.

        Order within a tick: input, gravity, lock check, line clear.  After a
        game over only ``Command.RESTART`` changes anything.
        """

        if self.game_over:
            if command is not Command.RESTART:
                return self.snapshot()
            self.reset_game()
            command = Command.NONE

        self._apply_command(command)
        self._apply_gravity()
        self._lock_or_game_over()
        if not self.game_over:
            cleared = self.board.clear_completed_lines()
            if cleared:
                self.score += cleared
                LOGGER.info("Cleared %d row(s). Score: %d", cleared, self.score)
        return self.snapshot()

    def _apply_command(self, command: Command) -> None:
        piece = self.active
        if command is Command.ROTATE:
            # Rotation is never checked against the board or the walls.
            piece.rotate()
        elif command is Command.MOVE_LEFT:
            if fits_horizontally(piece, -1):
                piece.move(-1, 0)
        elif command is Command.MOVE_RIGHT:
            if fits_horizontally(piece, 1):
                piece.move(1, 0)
        elif command is Command.SOFT_DROP:
            if not would_collide_below(self.board, piece):
                piece.move(0, 1)

    def _apply_gravity(self) -> None:
        self.gravity_counter += 1
        if self.gravity_counter < self.gravity_delay:
            return
        self.gravity_counter = 0
        if not would_collide_below(self.board, self.active):
            self.active.move(0, 1)

    def _lock_or_game_over(self) -> None:
        """Lock the active piece if it rests on something.

        A piece that comes to rest before its top row entered the board ends
        the game; it is neither merged nor replaced.
        """

        piece = self.active
        if not would_collide_below(self.board, piece):
            return
        if piece.y < 0:
            self.game_over = True
            LOGGER.info("Game over. Score: %d", self.score)
            return
        self.board.merge(piece_cells(piece))
        self.pieces += 1
        LOGGER.debug("Locked %s at (%d, %d)", piece.type.value, piece.x, piece.y)
        self.spawn_tetromino()
