"""Terminal front-end for the engine.

Drives :class:`GameState` at a fixed tick rate: read at most one key command,
advance the state, draw the frame, then sleep for what is left of the tick.
"""

from __future__ import annotations

import logging
import random
import sys
import time
from typing import Callable

from .config import GameConfig
from .game_state import Command, GameState, Snapshot
from .terminal import TerminalRenderer, decode_keys, raw_terminal, read_keys


LOGGER = logging.getLogger(__name__)


def run_loop(
    state: GameState,
    read_command: Callable[[], Command],
    draw: Callable[[Snapshot], None],
    *,
    tick_seconds: float,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """Run ticks until a quit command arrives and return the tick count."""

    ticks = 0
    while True:
        started = clock()
        command = read_command()
        if command is Command.QUIT:
            LOGGER.info("Quit after %d ticks, score %d", ticks, state.score)
            return ticks
        draw(state.tick(command))
        ticks += 1
        remaining = tick_seconds - (clock() - started)
        if remaining > 0:
            sleep(remaining)


def main(config: GameConfig) -> None:
    """Play in the controlling terminal until the player quits."""

    state = GameState(
        gravity_delay=config.gravity_delay, rng=random.Random(config.seed)
    )
    renderer = TerminalRenderer(sys.stdout)
    fd = sys.stdin.fileno()
    with raw_terminal(fd):
        renderer.hide_cursor()
        LOGGER.info("Game started")
        try:
            run_loop(
                state,
                lambda: decode_keys(read_keys(fd)),
                renderer.draw,
                tick_seconds=config.tick_seconds,
            )
        finally:
            renderer.close()
