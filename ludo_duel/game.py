from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .config import config
from .dice import DiceSource, RandomDice
from .rules import (
    compute_legal_moves,
    decide_next_turn,
    destination_for_roll,
    resolve_capture,
)
from .state import GameState
from .token import Token
from .types import MoveResult, TokenState, TurnDecision


@dataclass(slots=True)
class Game:
    """Two-player rule engine.

    Inputs are ``roll_dice``, ``select_token``, ``pass_turn`` and ``reset``.
    Each runs to completion; inputs that break the turn protocol are logged
    and ignored without touching the state.
    """

    dice_source: DiceSource = field(default_factory=lambda: RandomDice(config.SEED))
    state: GameState = field(default_factory=GameState)

    # --- Lifecycle ---
    def reset(self) -> None:
        self.state = GameState()
        logger.info("New game: {} to roll", self.current_player_name)

    # --- Queries ---
    @property
    def current_player_name(self) -> str:
        return self.state.players[self.state.current_player].name

    @property
    def game_over(self) -> bool:
        return self.state.winner is not None

    def legal_moves(self) -> List[Token]:
        """Legal tokens for the current player and pending dice value."""
        return compute_legal_moves(
            self.state, self.state.current_player, self.state.dice
        )

    def snapshot(self) -> GameState:
        """Detached copy of the state for renderers."""
        return copy.deepcopy(self.state)

    def to_dict(self) -> dict:
        return self.state.to_dict()

    # --- Dice ---
    def roll_dice(self) -> Optional[int]:
        if self.game_over:
            logger.warning("Roll ignored: game already won")
            return None
        if self.state.dice is not None:
            logger.warning(
                "Roll ignored: {} must move or pass with {}",
                self.current_player_name,
                self.state.dice,
            )
            return None
        value = self.dice_source.roll()
        self.state.dice = value
        self.state.highlighted = {tk.token_id for tk in self.legal_moves()}
        logger.debug(
            "{} rolled {} (legal: {})",
            self.current_player_name,
            value,
            sorted(self.state.highlighted) or "none",
        )
        return value

    # --- Moves ---
    def select_token(self, token_id: str) -> Optional[MoveResult]:
        if token_id not in self.state.highlighted:
            logger.warning("Selection of {} ignored: not a legal move", token_id)
            return None
        token = self.state.token_by_id(token_id)
        if token is None:
            logger.warning("Selection ignored: unknown token {}", token_id)
            return None
        return self.apply_move(token)

    def apply_move(self, token: Token) -> Optional[MoveResult]:
        state = self.state
        dice = state.dice
        if self.game_over or dice is None:
            logger.warning("Move of {} ignored: no pending roll", token.token_id)
            return None
        if state.token_by_id(token.token_id) is not token:
            # e.g. a token taken from snapshot()
            logger.warning("Move of {} ignored: token is not part of this game", token.token_id)
            return None
        if token.player_id != state.current_player:
            logger.warning("Move of {} ignored: not this player's turn", token.token_id)
            return None
        if token.token_id not in state.highlighted:
            logger.warning("Move of {} ignored: not a legal move", token.token_id)
            return None

        player = state.players[token.player_id]
        dest = destination_for_roll(token, dice, player.start_index)
        if dest is None:
            # highlighted set is stale; never expected after roll_dice
            logger.warning("Move of {} ignored: no destination for {}", token.token_id, dice)
            return None

        old_state, old_position = token.state, token.position
        captured: List[Token] = []
        if dest.state == TokenState.TRACK:
            if token.is_in_base():
                token.enter_track(dest.track_index)
            else:
                token.advance_on_track(dest.steps_moved, dest.track_index)
            captured = resolve_capture(state, dest.track_index, token.player_id)
        elif dest.state == TokenState.HOME_PATH:
            token.enter_home_path(dest.steps_moved, dest.home_index)
        else:
            token.finish(dest.steps_moved, dest.home_index)

        if captured:
            logger.info(
                "{} captured {} at slot {}",
                token.token_id,
                ", ".join(tk.token_id for tk in captured),
                dest.track_index,
            )
        logger.debug(
            "{} moved {} from {} {} -> {}",
            player.name,
            token.token_id,
            old_state.value,
            old_position,
            token,
        )

        decision = self.end_turn(token)
        return MoveResult(
            player_id=token.player_id,
            token_id=token.token_id,
            dice_roll=dice,
            old_state=old_state,
            new_state=token.state,
            old_position=old_position,
            new_position=token.position,
            captured=[tk.token_id for tk in captured],
            extra_turn=decision.extra_turn,
            winner=decision.winner,
        )

    def end_turn(self, token: Token) -> TurnDecision:
        state = self.state
        mover = state.players[state.current_player]
        decision = decide_next_turn(state, state.dice, mover.has_won())
        if decision.winner is not None:
            state.winner = decision.winner
            logger.info("{} wins with {}", mover.name, token.token_id)
        else:
            state.current_player = decision.next_player
        state.dice = None
        state.highlighted = set()
        return decision

    def pass_turn(self) -> bool:
        state = self.state
        if self.game_over or state.dice is None:
            logger.warning("Pass ignored: nothing rolled")
            return False
        if self.legal_moves():
            logger.warning(
                "Pass ignored: {} has a legal move with {}",
                self.current_player_name,
                state.dice,
            )
            return False
        logger.debug("{} cannot move with {}, passing", self.current_player_name, state.dice)
        state.current_player = (state.current_player + 1) % config.NUM_PLAYERS
        state.dice = None
        state.highlighted = set()
        return True
