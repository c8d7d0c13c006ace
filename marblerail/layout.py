"""Screen layout of the 15 x 15 board and the side panels.

Positions are expressed as paddings (a :class:`Margin`) inside the viewport,
the way an overlay slot places its content. The board is a square of the
viewport's height centred horizontally, so the viewport must be at least as
wide as it is tall.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

BOARD_TILES = 15

Vector = tuple[float, float]


@dataclass(frozen=True)
class Margin:
    """Padding from each edge of the viewport."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


def _side_panel(viewport: Vector) -> float:
    width, height = viewport
    return (width - height) / 2


def _tile_size(viewport: Vector) -> float:
    return viewport[1] / BOARD_TILES


def _span_position(tile: Vector, viewport: Vector, span: int) -> Margin:
    tx, ty = tile
    height = viewport[1]
    side = _side_panel(viewport)
    size = _tile_size(viewport)
    return Margin(
        left=side + size * tx,
        top=size * ty,
        right=side + size * (BOARD_TILES - (tx + span)),
        bottom=height - size * (ty + span),
    )


def tile_position(tile: Vector, viewport: Vector) -> Margin:
    """Padding that places one tile at board coordinates ``tile``."""
    return _span_position(tile, viewport, 1)


def large_tile_position(tile: Vector, viewport: Vector) -> Margin:
    """Padding for a 3 x 3 tile whose top-left ninth sits at ``tile``."""
    return _span_position(tile, viewport, 3)


def shrink_marble(padding: Margin, factor: float, viewport: Vector) -> Margin:
    """Pull every edge inwards; ``factor`` 1 shrinks a tile-sized marble to nothing."""
    step = _tile_size(viewport) / 2 * factor
    return Margin(
        left=padding.left + step,
        top=padding.top + step,
        right=padding.right + step,
        bottom=padding.bottom + step,
    )


def _round_half_to_zero(value: float) -> int:
    whole = math.trunc(value)
    if abs(value - whole) > 0.5:
        return whole + (1 if value > 0 else -1)
    return whole


def marble_center(position: Vector) -> tuple[int, int]:
    """The tile a marble is over: nearest integers, halves rounded towards zero."""
    return _round_half_to_zero(position[0]), _round_half_to_zero(position[1])


def score_position(viewport: Vector) -> Margin:
    """Padding of the score text in the left panel."""
    height = viewport[1]
    side = _side_panel(viewport)
    return Margin(
        left=side / 6,
        top=height / 10,
        right=side / 6 + height + side,
        bottom=height / 10 * 8.5,
    )


def time_position(viewport: Vector) -> Margin:
    """Padding of the time text in the right panel."""
    height = viewport[1]
    side = _side_panel(viewport)
    return Margin(
        left=side / 6 + height + side,
        top=height / 10,
        right=side / 6,
        bottom=height / 10 * 8.5,
    )


def countdown_position(viewport: Vector) -> Margin:
    """Padding of the start countdown, centred on the board."""
    height = viewport[1]
    side = _side_panel(viewport)
    inset = height * 0.43
    return Margin(left=inset + side, top=inset, right=inset + side, bottom=inset)


def score_font_size(viewport: Vector) -> float:
    """Font size for the panel texts, taken from the panel width or the height."""
    width, height = viewport
    if width / height < 2367 / 1273:
        return (width - height) * 0.04
    return height * 0.033


def intersection_screen_location(tile_index: int, viewport: Vector) -> Vector:
    """Screen point at the centre of the tile with flat index ``tile_index``."""
    height = viewport[1]
    size = _tile_size(viewport)
    column = tile_index % BOARD_TILES
    row = tile_index // BOARD_TILES
    return (
        _side_panel(viewport) + height / 30 + size * column,
        height / 30 + size * row,
    )