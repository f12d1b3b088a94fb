from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional


class Color(IntEnum):
    RED = 0
    BLUE = 1


class TokenState(Enum):
    """Possible locations of a token."""

    BASE = "base"  # not yet entered the track
    TRACK = "track"  # on the shared ring
    HOME_PATH = "home_path"  # on the player's private home path
    FINISHED = "finished"  # reached the end of the home path


class TurnPhase(Enum):
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_MOVE = "awaiting_move"
    WON = "won"


@dataclass(slots=True, frozen=True)
class TurnDecision:
    """Outcome of a completed move: who plays next, or who won."""

    next_player: int
    extra_turn: bool = False
    winner: Optional[int] = None


@dataclass(slots=True)
class MoveResult:
    player_id: int
    token_id: str
    dice_roll: int
    old_state: TokenState
    new_state: TokenState
    old_position: int
    new_position: int
    captured: List[str] = field(default_factory=list)
    extra_turn: bool = False
    winner: Optional[int] = None

    @property
    def entered_track(self) -> bool:
        return self.old_state == TokenState.BASE

    @property
    def entered_home(self) -> bool:
        return (
            self.old_state == TokenState.TRACK
            and self.new_state in (TokenState.HOME_PATH, TokenState.FINISHED)
        )

    @property
    def finished(self) -> bool:
        return self.new_state == TokenState.FINISHED
