import json
from typing import List, Optional, Tuple

from loguru import logger
from PIL import Image

from ludo_duel import Game, MoveResult, RandomDice
from ludo_duel.config import config

from .board_viz import draw_board, status_line
from .geometry import BoardGeometry, default_geometry, pick_token_at

HISTORY_LIMIT = 50

Frame = Tuple[Game, Image.Image, str]


def describe_move(game: Game, result: MoveResult) -> str:
    name = game.state.players[result.player_id].name
    parts = [f"{name} rolled {result.dice_roll}: token {result.token_id}"]
    if result.entered_track:
        parts.append("entered the track")
    elif result.finished:
        done = game.state.players[result.player_id].finished_count()
        parts.append(f"finished ({done}/{config.TOKENS_PER_PLAYER} home)")
    elif result.entered_home:
        parts.append(f"entered home at {result.new_position}")
    else:
        parts.append(f"{result.old_position} -> {result.new_position}")
    if result.captured:
        parts.append(f"captured {', '.join(result.captured)}")
    if result.winner is not None:
        parts.append("WINNER")
    elif result.extra_turn:
        parts.append("extra turn")
    return ", ".join(parts)


class EventHandler:
    """Maps UI events to engine calls and re-renders the board."""

    def __init__(
        self,
        geometry: Optional[BoardGeometry] = None,
        show_token_ids: bool = True,
    ):
        self.geometry = geometry or default_geometry()
        self.show_token_ids = show_token_ids

    def _frame(self, game: Game, desc: Optional[str] = None) -> Frame:
        img = draw_board(game.snapshot(), self.geometry, show_ids=self.show_token_ids)
        return game, img, desc or status_line(game.state)

    def init(self, seed: Optional[int] = None) -> Frame:
        game = Game(dice_source=RandomDice(config.SEED if seed is None else seed))
        game.reset()
        return self._frame(game)

    def reset(self, game: Optional[Game]) -> Frame:
        if game is None:
            return self.init()
        game.reset()
        return self._frame(game)

    def roll(self, game: Optional[Game]) -> Frame:
        if game is None:
            return self.init()
        if game.game_over:
            return self._frame(game, "Game over, press Reset to play again")
        if game.state.dice is not None:
            return self._frame(
                game, f"{game.current_player_name} must move or pass first"
            )
        game.roll_dice()
        return self._frame(game)

    def click(self, game: Optional[Game], x: float, y: float) -> Frame:
        """Pointer press on the board.

        With a pending roll, a press on a highlighted token moves it; any
        press while no token can move passes the turn. Otherwise ignored.
        """
        if game is None:
            return self.init()
        state = game.state
        if game.game_over or state.dice is None:
            return self._frame(game)

        hit = pick_token_at(self.geometry, state.tokens, x, y, state.highlighted)
        if hit is not None:
            result = game.select_token(hit)
            if result is not None:
                return self._frame(game, describe_move(game, result))
        if not state.highlighted:
            name, dice = game.current_player_name, state.dice
            if game.pass_turn():
                return self._frame(game, f"{name} rolled {dice}: no move, turn passed")
        logger.debug("Click at ({:.0f}, {:.0f}) missed every legal token", x, y)
        return self._frame(game)

    def export(self, game: Optional[Game]) -> str:
        if game is None:
            return "No game"
        return json.dumps(game.to_dict(), indent=2)

    @staticmethod
    def record(history: List[str], desc: str) -> List[str]:
        history = history + [desc]
        return history[-HISTORY_LIMIT:]
