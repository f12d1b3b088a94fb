"""Pure rule functions: destinations, legality, captures and turn order.

None of these touch the dice or the UI; ``Game`` composes them.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from .config import config
from .state import GameState
from .token import Token
from .types import TokenState, TurnDecision


class Destination(NamedTuple):
    state: TokenState
    steps_moved: int
    track_index: Optional[int] = None
    home_index: Optional[int] = None


def _home_destination(steps_moved: int, home_index: int) -> Destination:
    state = (
        TokenState.FINISHED if home_index == config.HOME_LEN else TokenState.HOME_PATH
    )
    return Destination(state, steps_moved, home_index=home_index)


def destination_for_roll(
    token: Token, dice: int | None, start_index: int
) -> Destination | None:
    """Where ``token`` would land with ``dice``, or None if it cannot move."""
    if dice is None or not config.DICE_MIN <= dice <= config.DICE_MAX:
        return None
    if token.is_finished():
        return None
    if token.is_in_base():
        if dice != config.EXIT_BASE_ROLL:
            return None
        return Destination(TokenState.TRACK, 0, track_index=start_index)
    if token.is_in_home_path():
        cand = token.home_index + dice
        if cand > config.HOME_LEN:
            return None
        return _home_destination(config.TRACK_LEN + cand, cand)
    cand = token.steps_moved + dice
    if cand < config.TRACK_LEN:
        return Destination(
            TokenState.TRACK,
            cand,
            track_index=(start_index + cand) % config.TRACK_LEN,
        )
    # Completed the lap: the remainder is spent on the home path, exact finish only
    overflow = cand - config.TRACK_LEN
    if overflow > config.HOME_LEN:
        return None
    return _home_destination(cand, overflow)


def compute_legal_moves(
    state: GameState, player_id: int, dice: int | None
) -> List[Token]:
    player = state.players[player_id]
    return [
        tk
        for tk in player.active_tokens()
        if destination_for_roll(tk, dice, player.start_index) is not None
    ]


def is_safe_square(slot: int) -> bool:
    return slot in config.SAFE_SQUARES


def resolve_capture(state: GameState, slot: int, moving_player: int) -> List[Token]:
    """Send every opposing track token on ``slot`` back to base.

    Safe squares never capture, and a player's own tokens are left alone.
    Returns the captured tokens.
    """
    if is_safe_square(slot):
        return []
    captured: List[Token] = []
    for opponent in state.opponents_of(moving_player):
        for tk in opponent.tokens:
            if tk.is_on_track() and tk.track_index == slot:
                tk.send_to_base()
                captured.append(tk)
    return captured


def decide_next_turn(
    state: GameState, dice: int, just_finished_all: bool
) -> TurnDecision:
    """Decide who acts after a completed move.

    A player whose tokens are all finished wins before any bonus is
    considered; otherwise a six keeps the turn and anything else passes it.
    """
    mover = state.current_player
    if just_finished_all:
        return TurnDecision(next_player=mover, winner=mover)
    if dice == config.EXTRA_TURN_ROLL:
        return TurnDecision(next_player=mover, extra_turn=True)
    return TurnDecision(next_player=(mover + 1) % config.NUM_PLAYERS)
