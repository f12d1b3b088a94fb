from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set

from .config import config
from .player import Player
from .token import Token
from .types import TurnPhase


@dataclass(slots=True)
class GameState:
    """Everything the engine mutates: tokens, turn, dice and outcome.

    Owned by ``Game``; renderers receive copies via ``Game.snapshot()``.
    """

    players: List[Player] = field(
        default_factory=lambda: [Player.create(i) for i in range(config.NUM_PLAYERS)]
    )
    current_player: int = 0
    dice: Optional[int] = None
    highlighted: Set[str] = field(default_factory=set)
    winner: Optional[int] = None

    @property
    def phase(self) -> TurnPhase:
        if self.winner is not None:
            return TurnPhase.WON
        if self.dice is None:
            return TurnPhase.AWAITING_ROLL
        return TurnPhase.AWAITING_MOVE

    def iter_tokens(self) -> Iterator[Token]:
        for player in self.players:
            yield from player.tokens

    @property
    def tokens(self) -> List[Token]:
        return list(self.iter_tokens())

    def token_by_id(self, token_id: str) -> Optional[Token]:
        for token in self.iter_tokens():
            if token.token_id == token_id:
                return token
        return None

    def opponents_of(self, player_id: int) -> List[Player]:
        return [p for p in self.players if p.player_id != player_id]

    def to_dict(self) -> dict:
        return {
            "current_player": self.current_player,
            "phase": self.phase.value,
            "dice": self.dice,
            "highlighted": sorted(self.highlighted),
            "winner": self.winner,
            "players": [
                {
                    "player_id": p.player_id,
                    "name": p.name,
                    "start_index": p.start_index,
                    "tokens": [t.to_dict() for t in p.tokens],
                }
                for p in self.players
            ],
        }
