"""Terminal input decoding and ANSI frame output.

Nothing in here knows the game rules: key bytes become :class:`Command`
values and :class:`Snapshot` frames become text.
"""

from __future__ import annotations

import logging
import os
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from .game_state import Command, Snapshot


LOGGER = logging.getLogger(__name__)

ESC = 0x1B
READ_SIZE = 32

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_AFTER_CURSOR = "\x1b[0J"

_ARROWS = {
    ord("A"): Command.ROTATE,
    ord("B"): Command.SOFT_DROP,
    ord("C"): Command.MOVE_RIGHT,
    ord("D"): Command.MOVE_LEFT,
}
_KEYS = {
    ord(" "): Command.RESTART,
    ord("q"): Command.QUIT,
}


class TerminalError(RuntimeError):
    """The terminal could not be prepared or restored."""


def decode_keys(data: bytes) -> Command:
    """Return the first command found in ``data``.

    Arrow keys arrive as three-byte ``ESC [ X`` sequences.  Only an escape
    byte that ends the buffer is the escape key itself and quits.  Other
    escape sequences (``ESC O X`` or an alt-modified key) and unknown bytes
    are skipped.
    """

    i = 0
    while i < len(data):
        ch = data[i]
        if ch == ESC:
            if i + 1 == len(data):
                return Command.QUIT
            introducer = data[i + 1]
            if introducer not in (ord("["), ord("O")):
                i += 2
                continue
            if i + 2 >= len(data):
                # Truncated sequence
                return Command.NONE
            if introducer == ord("["):
                command = _ARROWS.get(data[i + 2])
                if command is not None:
                    return command
            i += 3
            continue
        command = _KEYS.get(ch)
        if command is not None:
            return command
        i += 1
    return Command.NONE


def read_keys(fd: int) -> bytes:
    """Read whatever is waiting on the non-blocking descriptor ``fd``.

    Returns ``b""`` when nothing was typed.
    """

    try:
        return os.read(fd, READ_SIZE)
    except BlockingIOError:
        return b""


def render_frame(snapshot: Snapshot) -> str:
    """Return the text for one frame, one line per screen row."""

    if snapshot.game_over:
        lines = [
            "Game Over!",
            f"Score: {snapshot.score}",
            "Press SPACE to restart",
        ]
    else:
        width = snapshot.grid.shape[1]
        border = " " + "-" * width
        lines = [border]
        for row in snapshot.grid:
            lines.append("|" + "".join("#" if cell else " " for cell in row) + "|")
        lines.append(border)
        lines.append(f"Score: {snapshot.score}")
    return "\n".join(lines) + "\n"


class TerminalRenderer:
    """Draw frames in place by moving the cursor back over the last one."""

    def __init__(self, stream: TextIO = sys.stdout) -> None:
        self.stream = stream

    def draw(self, snapshot: Snapshot) -> None:
        frame = render_frame(snapshot)
        rows = frame.count("\n")
        self.stream.write(CLEAR_AFTER_CURSOR)
        self.stream.write(frame)
        self.stream.write(f"\x1b[{rows}A")
        self.stream.flush()

    def hide_cursor(self) -> None:
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()

    def close(self) -> None:
        """Erase the last frame and give the cursor back."""

        self.stream.write(CLEAR_AFTER_CURSOR + SHOW_CURSOR)
        self.stream.flush()


@contextmanager
def raw_terminal(fd: int) -> Iterator[int]:
    """Put ``fd`` into cbreak, no-echo, non-blocking mode for the block.

    The original attributes and blocking flag are restored on exit, also when
    the block raises.  A failed restore is logged; it only raises
    :class:`TerminalError` when the block itself finished normally.
    """

    if not os.isatty(fd):
        raise TerminalError("standard input is not a terminal")
    try:
        orig_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd, termios.TCSAFLUSH)
    except termios.error as exc:
        raise TerminalError(f"cannot configure terminal: {exc}") from exc
    was_blocking = os.get_blocking(fd)
    os.set_blocking(fd, False)
    LOGGER.debug("Terminal %d switched to cbreak mode", fd)
    try:
        yield fd
    except BaseException:
        _restore_terminal(fd, orig_attrs, was_blocking)
        raise
    error = _restore_terminal(fd, orig_attrs, was_blocking)
    if error is not None:
        raise TerminalError(f"cannot restore terminal: {error}") from error


def _restore_terminal(fd: int, attrs: list, was_blocking: bool) -> Optional[termios.error]:
    os.set_blocking(fd, was_blocking)
    try:
        termios.tcsetattr(fd, termios.TCSAFLUSH, attrs)
    except termios.error as exc:
        LOGGER.error("Cannot restore terminal %d: %s", fd, exc)
        return exc
    LOGGER.debug("Terminal %d restored", fd)
    return None
