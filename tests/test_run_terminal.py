import random

import pytest

from termtris.__main__ import parse_args
from termtris.game_state import Command, GameState
from termtris.run_terminal import run_loop


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current


def test_loop_ticks_until_quit():
    state = GameState(rng=random.Random(3))
    commands = iter([Command.NONE, Command.ROTATE, Command.NONE, Command.QUIT, Command.NONE])
    frames = []
    clock = FakeClock()
    sleeps = []

    ticks = run_loop(
        state,
        lambda: next(commands),
        frames.append,
        tick_seconds=0.1,
        sleep=sleeps.append,
        clock=clock,
    )

    assert ticks == 3
    assert len(frames) == 3
    assert state.active.rotation == 1
    assert sleeps == [pytest.approx(0.1)] * 3


def test_loop_sleeps_only_for_remaining_time():
    state = GameState(rng=random.Random(3))
    commands = iter([Command.NONE, Command.QUIT])
    clock = FakeClock()
    sleeps = []

    def slow_draw(_snapshot):
        clock.advance(0.04)

    run_loop(state, lambda: next(commands), slow_draw, tick_seconds=0.1, sleep=sleeps.append, clock=clock)

    assert sleeps == [pytest.approx(0.06)]


def test_parse_args_defaults():
    args = parse_args([])
    assert args.frontend == "terminal"
    assert args.tick_ms == pytest.approx(100.0)
    assert args.gravity_delay == 10
    assert args.seed is None


def test_parse_args_rejects_unknown_frontend():
    with pytest.raises(SystemExit):
        parse_args(["--frontend", "curses"])
