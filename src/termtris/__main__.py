"""Command line entry point.

Run with: `python -m termtris` (or the installed ``termtris`` script).

Arrow keys move and rotate, space restarts after a game over, escape or ``q``
quits.  Log output never goes to stdout since that is where the board is
drawn; pass ``--log-file`` to keep a log of the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import GRAVITY_DELAY, TICK_SECONDS, GameConfig


LOGGER = logging.getLogger("termtris")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="termtris", description="Falling-block puzzle in the terminal.")
    parser.add_argument(
        "--frontend",
        choices=("terminal", "pygame"),
        default="terminal",
        help="Where to draw the game (default: terminal)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence")
    parser.add_argument(
        "--tick-ms",
        type=float,
        default=TICK_SECONDS * 1000.0,
        help="Milliseconds per game tick (default: %(default)s)",
    )
    parser.add_argument(
        "--gravity-delay",
        type=int,
        default=GRAVITY_DELAY,
        help="Ticks between automatic one-row drops (default: %(default)s)",
    )
    parser.add_argument("--log-file", default=None, help="Write log messages to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Log level used with --log-file (default: %(default)s)",
    )
    return parser.parse_args(argv)


def configure_logging(log_file: Optional[str], level: str) -> None:
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if log_file:
        logging.basicConfig(filename=log_file, level=getattr(logging, level), format=fmt)
    else:
        logging.basicConfig(level=logging.WARNING, format=fmt)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    try:
        config = GameConfig(
            tick_seconds=args.tick_ms / 1000.0,
            gravity_delay=args.gravity_delay,
            seed=args.seed,
        )
    except ValueError as exc:
        print(f"termtris: {exc}", file=sys.stderr)
        return 2

    if args.frontend == "pygame":
        try:
            from .run_pygame import main as run
        except ImportError as exc:
            print(f"termtris: pygame front-end unavailable ({exc}); install termtris[pygame]", file=sys.stderr)
            return 1
    else:
        from .run_terminal import main as run

    from .terminal import TerminalError

    try:
        run(config)
    except KeyboardInterrupt:
        return 0
    except (TerminalError, OSError) as exc:
        LOGGER.error("Front-end failed: %s", exc)
        print(f"termtris: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
