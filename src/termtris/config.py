"""Runtime settings shared by the front ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Seconds between two ticks of the game loop.
TICK_SECONDS = 0.1
# Ticks between two automatic one-row descents.
GRAVITY_DELAY = 10


@dataclass(frozen=True)
class GameConfig:
    tick_seconds: float = TICK_SECONDS
    gravity_delay: int = GRAVITY_DELAY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive")
        if self.gravity_delay < 1:
            raise ValueError("gravity_delay must be at least 1")
