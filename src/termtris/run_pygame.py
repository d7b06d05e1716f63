"""Simple pygame front-end for the engine.

Draws the same snapshots as the terminal front-end into a window.  It runs
the identical fixed-tick loop, so pieces fall at the same speed in both.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .board import HEIGHT, WIDTH
from .config import GameConfig
from .game_state import Command, GameState, Snapshot
from .run_terminal import run_loop

LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30

CELL_COLOR = (0, 255, 255)
EMPTY_COLOR = (0, 0, 0)
GRID_COLOR = (50, 50, 50)

KEY_COMMANDS = {
    pygame.K_UP: Command.ROTATE,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_SPACE: Command.RESTART,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_q: Command.QUIT,
}


def command_for_events(events) -> Command:
    """Return the command of the first recognised event in ``events``."""

    for event in events:
        if event.type == pygame.QUIT:
            return Command.QUIT
        if event.type == pygame.KEYDOWN and event.key in KEY_COMMANDS:
            return KEY_COMMANDS[event.key]
    return Command.NONE


def draw_board(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Render the snapshot grid."""

    for r in range(HEIGHT):
        for c in range(WIDTH):
            color = CELL_COLOR if snapshot.grid[r, c] else EMPTY_COLOR
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, color, rect)
            pygame.draw.rect(screen, GRID_COLOR, rect, 1)


class GameRunner:
    """Own the window and the game state for one session."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.state = GameState(
            gravity_delay=config.gravity_delay, rng=random.Random(config.seed)
        )
        self._screen: Optional[pygame.Surface] = None

    def _read_command(self) -> Command:
        return command_for_events(pygame.event.get())

    def _draw(self, snapshot: Snapshot) -> None:
        if self._screen is None:
            return
        self._screen.fill(EMPTY_COLOR)
        draw_board(self._screen, snapshot)
        if snapshot.game_over:
            caption = f"termtris - Game Over - Score: {snapshot.score} - SPACE to restart"
        else:
            caption = f"termtris - Score: {snapshot.score}"
        pygame.display.set_caption(caption)
        pygame.display.flip()

    def run(self) -> None:
        pygame.init()
        try:
            self._screen = pygame.display.set_mode((WIDTH * CELL_SIZE, HEIGHT * CELL_SIZE))
            LOGGER.info("Game started")
            run_loop(
                self.state,
                self._read_command,
                self._draw,
                tick_seconds=self.config.tick_seconds,
            )
        finally:
            pygame.quit()
            LOGGER.info("Game stopped")


def main(config: GameConfig) -> None:
    GameRunner(config).run()
