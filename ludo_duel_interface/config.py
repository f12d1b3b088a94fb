import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

RGB = tuple[int, int, int]


def _hex(value: str) -> RGB:
    value = value.lstrip("#")
    return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))


@dataclass(slots=True)
class BoardConfig:
    # Canvas
    BOARD_WIDTH: int = int(os.getenv("BOARD_WIDTH", 720))
    BOARD_HEIGHT: int = int(os.getenv("BOARD_HEIGHT", 720))
    MARGIN: int = 80  # outer rounded rectangle inset from the canvas edge
    CORNER_RADIUS: int = 50
    PERIMETER_STEPS: int = 4000  # trace resolution for equidistant sampling

    # Pieces
    DOT_RADIUS: int = 12
    HOME_DOT_RADIUS: int = 10
    TOKEN_RADIUS: int = 14
    PICK_TOLERANCE: int = 6
    BASE_SPACING: int = 40
    BASE_ANCHORS: list[tuple[float, float]] = field(
        default_factory=lambda: [(0.22, 0.22), (0.78, 0.78)]
    )  # Red top-left, Blue bottom-right
    STACK_OFFSET: int = 6

    # Palette
    PLAYER_COLORS: list[RGB] = field(
        default_factory=lambda: [_hex("#ef4444"), _hex("#3b82f6")]
    )
    BASE_GLOWS: list[RGB] = field(
        default_factory=lambda: [_hex("#2b0f13"), _hex("#0d1530")]
    )
    BACKGROUND: RGB = _hex("#0a1226")
    BOARD_EDGE: RGB = _hex("#263246")
    TRACK: RGB = _hex("#1f2937")
    TRACK_DARK: RGB = _hex("#141b2a")
    SAFE: RGB = _hex("#10b981")
    HOME: RGB = _hex("#f59e0b")
    HALO: RGB = _hex("#22d3ee")
    TEXT: RGB = _hex("#e5e7eb")
    LABEL: RGB = _hex("#0b1021")

    def __post_init__(self):
        if self.BOARD_WIDTH <= 2 * self.MARGIN or self.BOARD_HEIGHT <= 2 * self.MARGIN:
            raise ValueError("board is too small for its margin")
        if 2 * self.CORNER_RADIUS > min(
            self.BOARD_WIDTH, self.BOARD_HEIGHT
        ) - 2 * self.MARGIN:
            raise ValueError("CORNER_RADIUS does not fit the board")


board_config = BoardConfig()
