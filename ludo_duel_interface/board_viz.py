from __future__ import annotations

from collections import defaultdict
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ludo_duel.config import config
from ludo_duel.state import GameState
from ludo_duel.types import TurnPhase

from .config import BoardConfig, board_config
from .geometry import BoardGeometry, Point, default_geometry, token_screen_position

_FONTS: Dict[int, ImageFont.ImageFont] = {}

# Nudges for tokens sharing one slot, in units of STACK_OFFSET
STACK_NUDGES = [(0, 0), (1, -1), (-1, 1), (0, -1)]


def _font(size: int):
    if size not in _FONTS:
        try:
            _FONTS[size] = ImageFont.truetype("DejaVuSans-Bold.ttf", size)
        except OSError:
            _FONTS[size] = ImageFont.load_default(size=size)
    return _FONTS[size]


def _rgba(rgb: Tuple[int, int, int], alpha: float) -> Tuple[int, int, int, int]:
    return (*rgb, int(round(alpha * 255)))


def _circle(d: ImageDraw.ImageDraw, center: Point, radius: float, **kwargs) -> None:
    x, y = center
    d.ellipse((x - radius, y - radius, x + radius, y + radius), **kwargs)


def _glow(
    d: ImageDraw.ImageDraw,
    center: Point,
    inner: float,
    outer: float,
    rgb: Tuple[int, int, int],
    alpha: float,
    rings: int = 12,
) -> None:
    """Approximate a radial gradient with stacked translucent discs."""
    step_alpha = alpha / rings
    for i in range(rings):
        radius = outer - (outer - inner) * i / rings
        _circle(d, center, radius, fill=_rgba(rgb, step_alpha))


def _text_center(d: ImageDraw.ImageDraw, center: Point, text: str, font, fill) -> None:
    left, top, right, bottom = d.textbbox((0, 0), text, font=font)
    x = center[0] - (right - left) / 2 - left
    y = center[1] - (bottom - top) / 2 - top
    d.text((x, y), text, fill=fill, font=font)


def _inset_box(geometry: BoardGeometry, pad: float):
    o = geometry.outer
    return (o.x + pad, o.y + pad, o.x + o.w - pad, o.y + o.h - pad), max(20, o.r - pad)


def _draw_background(d: ImageDraw.ImageDraw, geometry: BoardGeometry, cfg: BoardConfig) -> None:
    box, radius = _inset_box(geometry, 0)
    d.rounded_rectangle(box, radius=radius, outline=cfg.BOARD_EDGE, width=4)
    _glow(d, geometry.center, 40, min(geometry.outer.w, geometry.outer.h) / 2 - 6, cfg.HALO, 0.06)
    _text_center(d, (geometry.center[0], 40), "L U D O", _font(48), _rgba((255, 255, 255), 0.05))


def _draw_track(d: ImageDraw.ImageDraw, geometry: BoardGeometry, cfg: BoardConfig) -> None:
    box, radius = _inset_box(geometry, 36)
    d.rounded_rectangle(box, radius=radius, outline=_rgba((0, 0, 0), 0.18), width=24)
    for i, p in enumerate(geometry.track):
        _circle(d, p, cfg.DOT_RADIUS, fill=cfg.TRACK if i % 2 == 0 else cfg.TRACK_DARK)
    for slot in sorted(config.SAFE_SQUARES):
        _circle(d, geometry.track[slot], cfg.DOT_RADIUS - 2, fill=cfg.SAFE)


def _draw_home_paths(d: ImageDraw.ImageDraw, geometry: BoardGeometry, cfg: BoardConfig) -> None:
    for path in geometry.home_paths.values():
        for i, p in enumerate(path):
            _circle(d, p, cfg.HOME_DOT_RADIUS, fill=_rgba(cfg.HOME, 0.22 + 0.11 * i))
    _circle(d, geometry.center, 28, fill=_rgba(cfg.HOME, 0.25), outline=cfg.HOME, width=2)


def _draw_bases(d: ImageDraw.ImageDraw, geometry: BoardGeometry, cfg: BoardConfig) -> None:
    for player_id, spots in geometry.base_spots.items():
        cx = sum(p[0] for p in spots) / len(spots)
        cy = sum(p[1] for p in spots) / len(spots)
        _glow(d, (cx, cy), 10, 90, cfg.BASE_GLOWS[player_id], 0.9)


def _draw_token(
    d: ImageDraw.ImageDraw,
    pos: Point,
    rgb: Tuple[int, int, int],
    label: Optional[str],
    selectable: bool,
    cfg: BoardConfig,
) -> None:
    x, y = pos
    r = cfg.TOKEN_RADIUS
    if selectable:
        _glow(d, pos, 5, 28, cfg.HALO, 0.35)
    _circle(d, (x + 2, y + 3), r, fill=_rgba((0, 0, 0), 0.45))
    _circle(d, pos, r, fill=rgb, outline=_rgba((0, 0, 0), 0.5), width=2)
    _circle(d, (x - 5, y - 6), r / 2.2, fill=_rgba((255, 255, 255), 0.18))
    if label:
        _text_center(d, (x, y + 0.5), label, _font(12), cfg.LABEL)


def _draw_tokens(
    d: ImageDraw.ImageDraw,
    state: GameState,
    geometry: BoardGeometry,
    cfg: BoardConfig,
    show_ids: bool,
) -> None:
    occupancy: Dict[Point, int] = defaultdict(int)
    for token in state.iter_tokens():
        pos = token_screen_position(geometry, token)
        if pos is None:
            continue
        n = occupancy[pos]
        occupancy[pos] += 1
        nx, ny = STACK_NUDGES[n % len(STACK_NUDGES)]
        nudged = (pos[0] + nx * cfg.STACK_OFFSET, pos[1] + ny * cfg.STACK_OFFSET)
        _draw_token(
            d,
            nudged,
            cfg.PLAYER_COLORS[token.player_id],
            str(token.index + 1) if show_ids else None,
            token.token_id in state.highlighted,
            cfg,
        )


def _draw_turn_marker(d: ImageDraw.ImageDraw, state: GameState, geometry: BoardGeometry, cfg: BoardConfig) -> None:
    start = state.players[state.current_player].start_index
    _circle(d, geometry.track[start], cfg.DOT_RADIUS + 8, outline=_rgba(cfg.SAFE, 0.35), width=4)


def status_line(state: GameState) -> str:
    player = state.players[state.current_player]
    phase = state.phase
    if phase == TurnPhase.WON:
        return f"{state.players[state.winner].name} wins!"
    if phase == TurnPhase.AWAITING_ROLL:
        return f"{player.name} to roll"
    if not state.highlighted:
        return f"{player.name} rolled {state.dice}: no move, click to pass"
    return f"{player.name} rolled {state.dice}: pick a token"


def draw_board(
    state: GameState,
    geometry: Optional[BoardGeometry] = None,
    show_ids: bool = True,
    cfg: BoardConfig = board_config,
) -> Image.Image:
    """Render ``state`` onto a fresh image. The state is only read."""
    geometry = geometry or default_geometry()
    img = Image.new("RGB", (geometry.width, geometry.height), cfg.BACKGROUND)
    d = ImageDraw.Draw(img, "RGBA")

    _draw_background(d, geometry, cfg)
    _draw_track(d, geometry, cfg)
    _draw_home_paths(d, geometry, cfg)
    _draw_bases(d, geometry, cfg)
    _draw_tokens(d, state, geometry, cfg, show_ids)
    if state.phase != TurnPhase.WON:
        _draw_turn_marker(d, state, geometry, cfg)

    _text_center(
        d,
        (geometry.center[0], geometry.height - 40),
        status_line(state),
        _font(20),
        cfg.TEXT,
    )
    return img
