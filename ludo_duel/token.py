"""
Token representation for the two-player game.
Each player owns four tokens that travel base -> track -> home path.
"""

from dataclasses import dataclass
from typing import Optional

from .types import TokenState


@dataclass(slots=True)
class Token:
    """
    A single token. Holds location state only; rule logic lives in
    ``ludo_duel.rules`` and the ``Game`` engine.
    """

    player_id: int  # 0 or 1
    index: int  # 0..3 within the player
    state: TokenState = TokenState.BASE
    steps_moved: int = 0  # steps taken since leaving base
    track_index: Optional[int] = None  # 0..51 while on the track
    home_index: Optional[int] = None  # 0..6 once off the track

    @property
    def token_id(self) -> str:
        return f"{self.player_id}-{self.index}"

    def is_in_base(self) -> bool:
        return self.state == TokenState.BASE

    def is_on_track(self) -> bool:
        return self.state == TokenState.TRACK

    def is_in_home_path(self) -> bool:
        return self.state == TokenState.HOME_PATH

    def is_finished(self) -> bool:
        return self.state == TokenState.FINISHED

    @property
    def position(self) -> int:
        """Index within the token's current area.

        Base slot for tokens in base, ring slot on the track, home slot on
        the home path (HOME_LEN once finished).
        """
        if self.state == TokenState.BASE:
            return self.index
        if self.state == TokenState.TRACK:
            return self.track_index
        return self.home_index

    def enter_track(self, start_index: int) -> None:
        self.state = TokenState.TRACK
        self.steps_moved = 0
        self.track_index = start_index
        self.home_index = None

    def advance_on_track(self, steps_moved: int, track_index: int) -> None:
        self.steps_moved = steps_moved
        self.track_index = track_index

    def enter_home_path(self, steps_moved: int, home_index: int) -> None:
        self.state = TokenState.HOME_PATH
        self.steps_moved = steps_moved
        self.track_index = None
        self.home_index = home_index

    def finish(self, steps_moved: int, home_index: int) -> None:
        self.state = TokenState.FINISHED
        self.steps_moved = steps_moved
        self.track_index = None
        self.home_index = home_index

    def send_to_base(self) -> None:
        self.state = TokenState.BASE
        self.steps_moved = 0
        self.track_index = None
        self.home_index = None

    def to_dict(self) -> dict:
        """Convert token to a JSON-friendly dictionary."""
        return {
            "token_id": self.token_id,
            "player_id": self.player_id,
            "state": self.state.value,
            "position": self.position,
            "steps_moved": self.steps_moved,
            "track_index": self.track_index,
            "home_index": self.home_index,
            "finished": self.is_finished(),
        }

    def __str__(self) -> str:
        return f"Token({self.token_id}: {self.state.value} at {self.position})"
