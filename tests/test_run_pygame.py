import os
import types

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from termtris.game_state import Command  # noqa: E402
from termtris.run_pygame import command_for_events  # noqa: E402


def _key(key):
    return types.SimpleNamespace(type=pygame.KEYDOWN, key=key)


def test_arrow_keys_map_to_commands():
    assert command_for_events([_key(pygame.K_UP)]) is Command.ROTATE
    assert command_for_events([_key(pygame.K_LEFT)]) is Command.MOVE_LEFT
    assert command_for_events([_key(pygame.K_RIGHT)]) is Command.MOVE_RIGHT
    assert command_for_events([_key(pygame.K_DOWN)]) is Command.SOFT_DROP
    assert command_for_events([_key(pygame.K_SPACE)]) is Command.RESTART


def test_first_recognised_event_wins():
    events = [_key(pygame.K_a), _key(pygame.K_RIGHT), _key(pygame.K_LEFT)]
    assert command_for_events(events) is Command.MOVE_RIGHT
    assert command_for_events([]) is Command.NONE


def test_window_close_quits():
    assert command_for_events([types.SimpleNamespace(type=pygame.QUIT)]) is Command.QUIT
