"""
Ludo Duel
Two-player Ludo rule engine.
"""

from .config import config
from .dice import DiceSource, RandomDice, ScriptedDice
from .game import Game
from .player import Player
from .rules import (
    compute_legal_moves,
    decide_next_turn,
    destination_for_roll,
    resolve_capture,
)
from .state import GameState
from .token import Token
from .types import Color, MoveResult, TokenState, TurnDecision, TurnPhase

__all__ = [
    "config",
    "Color",
    "DiceSource",
    "RandomDice",
    "ScriptedDice",
    "Game",
    "GameState",
    "Player",
    "Token",
    "TokenState",
    "TurnPhase",
    "TurnDecision",
    "MoveResult",
    "compute_legal_moves",
    "decide_next_turn",
    "destination_for_roll",
    "resolve_capture",
]
