"""Marbles rolling along the track and around its quarter-circle bends.

A bend is entered at the edge of a tile. The point where the marble
crossed that edge is the pivot. The marble follows a quarter circle of
radius half a tile, which has an arc length of about 0.7854 tiles. Once
that distance has been covered, the marble snaps onto the exit edge and
rolls straight on in its new direction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from marblerail.layout import Vector, marble_center

ARC_LENGTH = 0.7854
_QUARTER = 1.57079


class Direction(IntEnum):
    """Direction of travel of a marble."""

    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4

    @property
    def movement(self) -> tuple[int, int]:
        """Unit step on the board for this direction (y grows downwards)."""
        return _MOVEMENTS[self]


_MOVEMENTS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

# Each turn index maps to the direction travelled into the bend and the
# direction the marble leaves it in.
_TURNS: dict[int, tuple[Direction, Direction]] = {
    0: (Direction.UP, Direction.RIGHT),
    1: (Direction.UP, Direction.LEFT),
    2: (Direction.RIGHT, Direction.DOWN),
    3: (Direction.RIGHT, Direction.UP),
    4: (Direction.DOWN, Direction.LEFT),
    5: (Direction.DOWN, Direction.RIGHT),
    6: (Direction.LEFT, Direction.UP),
    7: (Direction.LEFT, Direction.DOWN),
}

# For each incoming direction: the turn codes that take the first of its two
# turns, then the first turn and the second turn.
_TURN_CHOICES: dict[Direction, tuple[frozenset[int], int, int]] = {
    Direction.UP: (frozenset({1, 4}), 0, 1),
    Direction.RIGHT: (frozenset({2, 6}), 2, 3),
    Direction.DOWN: (frozenset({3, 10}), 4, 5),
    Direction.LEFT: (frozenset({0, 8}), 6, 7),
}

# The lateral swing of this turn measures its phase the other way round.
_MIRRORED_PHASE = frozenset({7})


def _round_half_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _component(vector: Vector, axis: int) -> float:
    return vector[axis]


def _axis(direction: Direction) -> int:
    return 0 if direction.movement[0] else 1


def _sign(direction: Direction) -> int:
    dx, dy = direction.movement
    return dx or dy


@dataclass
class Marble:
    """A marble on the board.

    ``position`` is in tile units, ``center`` is the tile the marble was last
    seen over, and while ``turning`` is true the marble follows the bend
    ``turn`` around ``pivot``.
    """

    position: Vector
    direction: Direction
    colour: int = 0
    movement: tuple[int, int] | None = None
    center: tuple[int, int] | None = None
    turning: bool = False
    turn: int = 0
    pivot: Vector = field(default=(0.0, 0.0))

    def __post_init__(self) -> None:
        self.direction = Direction(self.direction)
        self.position = (float(self.position[0]), float(self.position[1]))
        if self.movement is None:
            self.movement = self.direction.movement
        if self.center is None:
            self.center = marble_center(self.position)

    def advance(self, distance: float) -> Vector:
        """Move ``distance`` tiles along the current movement and return the new position."""
        dx, dy = self.movement
        x, y = self.position
        self.position = (x + distance * dx, y + distance * dy)
        return self.position

    def start_turn(self, is_intersection: bool, track_value: int) -> Vector:
        """Begin the bend given by the tile's track value and return the drawn position.

        Intersections and plain bends number their track values differently.
        Both are mapped onto one code that picks between the two possible
        turns for the current direction.
        """
        code = track_value + 4 if is_intersection else track_value - 3
        x, y = self.position

        if self.direction is Direction.UP:
            self.pivot = (x, math.trunc(y) + 0.5)
        elif self.direction is Direction.RIGHT:
            self.pivot = (-0.5 if x < 0 else math.trunc(x) + 0.5, y)
        elif self.direction is Direction.DOWN:
            self.pivot = (x, -0.5 if y < 0 else math.trunc(y) + 0.5)
        else:
            self.pivot = (math.trunc(x) + 0.5, y)

        first_codes, first_turn, second_turn = _TURN_CHOICES[self.direction]
        self.turn = first_turn if code in first_codes else second_turn
        self.turning = True
        return self.turn_step()

    def turn_step(self) -> Vector:
        """Return where the marble is drawn on its bend, finishing the bend at its end."""
        try:
            travel, exit_direction = _TURNS[self.turn]
        except KeyError:
            raise ValueError(f"unknown turn {self.turn!r}") from None

        along = _axis(travel)
        across = _axis(exit_direction)
        travel_sign = _sign(travel)
        exit_sign = _sign(exit_direction)

        progress = travel_sign * (
            _component(self.position, along) - _component(self.pivot, along)
        )

        if progress >= ARC_LENGTH:
            snapped = [0.0, 0.0]
            snapped[along] = float(
                _round_half_from_zero(_component(self.pivot, along) + travel_sign * 0.5)
            )
            snapped[across] = _round_half_from_zero(_component(self.pivot, across)) + exit_sign * 0.5
            self.turning = False
            self.direction = exit_direction
            self.movement = exit_direction.movement
            self.position = (snapped[0], snapped[1])
            return self.position

        angle = progress / ARC_LENGTH * _QUARTER
        phase = -angle if self.turn in _MIRRORED_PHASE else angle
        drawn = [0.0, 0.0]
        drawn[along] = _component(self.pivot, along) + travel_sign * 0.5 * math.sin(angle)
        drawn[across] = _component(self.pivot, across) + exit_sign * (
            0.5 - 0.5 * math.sin(_QUARTER - phase)
        )
        return (drawn[0], drawn[1])