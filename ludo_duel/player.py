from __future__ import annotations

from dataclasses import dataclass, field

from .config import config
from .token import Token
from .types import Color


@dataclass(slots=True)
class Player:
    player_id: int
    name: str
    color: Color
    start_index: int
    tokens: list[Token] = field(init=False)

    def __post_init__(self) -> None:
        self.tokens = [
            Token(player_id=self.player_id, index=i)
            for i in range(config.TOKENS_PER_PLAYER)
        ]

    @classmethod
    def create(cls, player_id: int) -> "Player":
        return cls(
            player_id=player_id,
            name=config.PLAYER_NAMES[player_id],
            color=Color(player_id),
            start_index=config.PLAYER_START_SQUARES[player_id],
        )

    def active_tokens(self) -> list[Token]:
        return [t for t in self.tokens if not t.is_finished()]

    def finished_count(self) -> int:
        return sum(1 for t in self.tokens if t.is_finished())

    def has_won(self) -> bool:
        return all(t.is_finished() for t in self.tokens)
