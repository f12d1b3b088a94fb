"""
Ludo Duel view layer
Board geometry, Pillow rendering and the Gradio front end.
"""

from .board_viz import draw_board, status_line
from .config import BoardConfig, board_config
from .event_handler import EventHandler, describe_move
from .geometry import (
    BoardGeometry,
    build_geometry,
    default_geometry,
    pick_token_at,
    point_on_rounded_rect,
    sample_perimeter_points,
    token_screen_position,
)

__all__ = [
    "BoardConfig",
    "board_config",
    "BoardGeometry",
    "build_geometry",
    "default_geometry",
    "point_on_rounded_rect",
    "sample_perimeter_points",
    "token_screen_position",
    "pick_token_at",
    "draw_board",
    "status_line",
    "EventHandler",
    "describe_move",
]
