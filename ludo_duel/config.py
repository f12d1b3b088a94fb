import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    return int(raw) if raw not in (None, "") else None


@dataclass(slots=True)
class Config:
    # --- Constants ---
    TRACK_LEN: int = 52  # shared ring, slots 0..51
    HOME_LEN: int = 6  # private home path; home_index == HOME_LEN means finished
    TOKENS_PER_PLAYER: int = 4
    NUM_PLAYERS: int = 2

    # Absolute start slots on the shared ring (Red, Blue)
    PLAYER_START_SQUARES: list[int] = field(default_factory=lambda: [0, 26])
    PLAYER_NAMES: list[str] = field(default_factory=lambda: ["Red", "Blue"])

    # Dice
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_BASE_ROLL: int = 6
    EXTRA_TURN_ROLL: int = 6
    SEED: int | None = field(default_factory=lambda: _optional_int("LUDO_SEED"))

    # Derived (populated in __post_init__ due to slots)
    SAFE_SQUARES: frozenset[int] = frozenset()
    FULL_LAP: int = 0

    def __post_init__(self):
        if self.NUM_PLAYERS != 2:
            raise ValueError("NUM_PLAYERS must be 2")
        if len(self.PLAYER_START_SQUARES) != self.NUM_PLAYERS:
            raise ValueError("PLAYER_START_SQUARES needs one entry per player")
        if len(self.PLAYER_NAMES) != self.NUM_PLAYERS:
            raise ValueError("PLAYER_NAMES needs one entry per player")
        for start in self.PLAYER_START_SQUARES:
            if not 0 <= start < self.TRACK_LEN:
                raise ValueError(f"start square {start} is off the track")
        for roll in (self.EXIT_BASE_ROLL, self.EXTRA_TURN_ROLL):
            if not self.DICE_MIN <= roll <= self.DICE_MAX:
                raise ValueError(f"special roll {roll} is not a possible dice value")
        # Start squares are the only safe squares
        self.SAFE_SQUARES = frozenset(self.PLAYER_START_SQUARES)
        # Steps from leaving base to finishing
        self.FULL_LAP = self.TRACK_LEN + self.HOME_LEN


config = Config()
