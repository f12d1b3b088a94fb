from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from .config import config


class DiceSource(Protocol):
    def roll(self) -> int:
        ...


@dataclass(slots=True)
class RandomDice:
    """Uniform die backed by a private, seedable RNG."""

    seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def roll(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)


@dataclass(slots=True)
class ScriptedDice:
    """Replays a fixed sequence of rolls."""

    values: Sequence[int]
    _cursor: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        for v in self.values:
            if not config.DICE_MIN <= v <= config.DICE_MAX:
                raise ValueError(f"dice value {v} outside {config.DICE_MIN}..{config.DICE_MAX}")

    def roll(self) -> int:
        if self._cursor >= len(self.values):
            raise IndexError("scripted dice exhausted")
        value = self.values[self._cursor]
        self._cursor += 1
        return value
