"""Board geometry: where every slot and token sits on the canvas.

The track is 52 points sampled at equal arc length along a rounded
rectangle. Home paths run straight from each player's start slot toward the
centre, and each base is a 2x2 grid of spots in a corner.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from ludo_duel.config import config
from ludo_duel.token import Token

from .config import BoardConfig, board_config

Point = Tuple[float, float]


class Rect(NamedTuple):
    x: float
    y: float
    w: float
    h: float
    r: float


@dataclass(frozen=True)
class BoardGeometry:
    width: int
    height: int
    outer: Rect
    center: Point
    track: Tuple[Point, ...]
    home_paths: Dict[int, Tuple[Point, ...]]  # keyed by player_id
    base_spots: Dict[int, Tuple[Point, ...]]  # keyed by player_id
    token_radius: int
    pick_radius: int


def point_on_rounded_rect(t: float, rect: Rect) -> Point:
    """Point at parameter ``t`` in [0, 1] along the rounded rectangle.

    The walk starts where the top-left corner arc meets the top side and
    goes clockwise. Each quarter of ``t`` covers one side's straight run
    followed by the next corner arc.
    """
    x, y, w, h, r = rect
    tt = min(max(t, 0.0), 1.0) * 4
    seg = min(int(tt), 3)
    k = tt - seg
    arc = math.pi * r / 2

    side = w if seg in (0, 2) else h
    straight = side - 2 * r
    pos = k * (straight + arc)
    a = max(pos - straight, 0.0) / arc * (math.pi / 2) if arc else 0.0
    on_straight = pos <= straight

    if seg == 0:  # top, left -> right
        if on_straight:
            return (x + r + pos, y)
        return (x + w - r + math.sin(a) * r, y + (1 - math.cos(a)) * r)
    if seg == 1:  # right, top -> bottom
        if on_straight:
            return (x + w, y + r + pos)
        return (x + w - (1 - math.cos(a)) * r, y + h - r + math.sin(a) * r)
    if seg == 2:  # bottom, right -> left
        if on_straight:
            return (x + w - r - pos, y + h)
        return (x + r - math.sin(a) * r, y + h - (1 - math.cos(a)) * r)
    # left, bottom -> top
    if on_straight:
        return (x, y + h - r - pos)
    return (x + (1 - math.cos(a)) * r, y + r - math.sin(a) * r)


def sample_perimeter_points(n: int, rect: Rect, steps: int = 4000) -> List[Point]:
    """Sample ``n`` points spaced evenly by arc length around ``rect``."""
    if n <= 0:
        return []
    ts = np.linspace(0.0, 1.0, steps + 1)
    traced = np.array([point_on_rounded_rect(float(t), rect) for t in ts])
    seg_len = np.hypot(*np.diff(traced, axis=0).T)
    cum = np.concatenate(([0.0], np.cumsum(seg_len)))
    targets = np.arange(n) / n * cum[-1]
    idx = np.minimum(np.searchsorted(cum, targets, side="left"), len(traced) - 1)
    return [(float(px), float(py)) for px, py in traced[idx]]


def _lerp(p: Point, q: Point, t: float) -> Point:
    return (p[0] + (q[0] - p[0]) * t, p[1] + (q[1] - p[1]) * t)


def build_home_path(entry: Point, center: Point, length: int) -> List[Point]:
    return [_lerp(entry, center, i / (length + 1)) for i in range(1, length + 1)]


def build_base_spots(anchor: Point, spacing: float) -> List[Point]:
    cx, cy = anchor
    return [
        (cx - spacing, cy - spacing),
        (cx + spacing, cy - spacing),
        (cx - spacing, cy + spacing),
        (cx + spacing, cy + spacing),
    ]


def build_geometry(cfg: BoardConfig = board_config) -> BoardGeometry:
    outer = Rect(
        cfg.MARGIN,
        cfg.MARGIN,
        cfg.BOARD_WIDTH - 2 * cfg.MARGIN,
        cfg.BOARD_HEIGHT - 2 * cfg.MARGIN,
        cfg.CORNER_RADIUS,
    )
    center = (cfg.BOARD_WIDTH / 2, cfg.BOARD_HEIGHT / 2)
    track = sample_perimeter_points(config.TRACK_LEN, outer, cfg.PERIMETER_STEPS)

    home_paths: Dict[int, Tuple[Point, ...]] = {}
    base_spots: Dict[int, Tuple[Point, ...]] = {}
    for player_id, start in enumerate(config.PLAYER_START_SQUARES):
        home_paths[player_id] = tuple(
            build_home_path(track[start], center, config.HOME_LEN)
        )
        fx, fy = cfg.BASE_ANCHORS[player_id]
        anchor = (outer.x + outer.w * fx, outer.y + outer.h * fy)
        base_spots[player_id] = tuple(build_base_spots(anchor, cfg.BASE_SPACING))

    return BoardGeometry(
        width=cfg.BOARD_WIDTH,
        height=cfg.BOARD_HEIGHT,
        outer=outer,
        center=center,
        track=tuple(track),
        home_paths=home_paths,
        base_spots=base_spots,
        token_radius=cfg.TOKEN_RADIUS,
        pick_radius=cfg.TOKEN_RADIUS + cfg.PICK_TOLERANCE,
    )


@lru_cache(maxsize=1)
def default_geometry() -> BoardGeometry:
    return build_geometry(board_config)


def token_screen_position(geometry: BoardGeometry, token: Token) -> Optional[Point]:
    if token.is_in_base():
        return geometry.base_spots[token.player_id][token.index]
    if token.is_on_track():
        return geometry.track[token.track_index]
    if token.home_index is not None:
        path = geometry.home_paths[token.player_id]
        return path[min(token.home_index, len(path) - 1)]
    return None


def pick_token_at(
    geometry: BoardGeometry,
    tokens: Sequence[Token],
    x: float,
    y: float,
    allowed_ids: Iterable[str],
) -> Optional[str]:
    """Id of the topmost allowed token under the pointer, if any."""
    allowed = set(allowed_ids)
    for token in reversed(tokens):
        if token.token_id not in allowed:
            continue
        pos = token_screen_position(geometry, token)
        if pos is None:
            continue
        if math.hypot(pos[0] - x, pos[1] - y) <= geometry.pick_radius:
            return token.token_id
    return None
