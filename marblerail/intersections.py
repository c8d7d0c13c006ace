"""Switchable intersections on the track and the auto-cursor that selects them.

Each intersection runs through four states. Pressing it moves one state
forward, and releasing it moves one more, so a full click moves it two
states. In the last two states a marble reaching the tile turns off the
straight line.

With the auto-cursor on, the individual intersection buttons are disabled.
The intersection nearest the mouse gets the focus instead, and one
board-wide button presses whichever intersection has the focus. While that
button is held the focus is locked, so moving the mouse cannot retarget a
press that is already under way.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from marblerail.layout import BOARD_TILES, Vector, intersection_screen_location

BOARD_CELLS = BOARD_TILES * BOARD_TILES
INTERSECTION_KINDS = 8
INTERSECTION_STATES = 4
MAX_INTERSECTIONS = 17
_TURNING_FROM_STATE = 2


@dataclass
class Intersection:
    """One intersection tile.

    ``kind`` selects which of the eight intersection shapes it is, and
    ``cycle`` is its current state.
    """

    kind: int
    position: tuple[int, int]
    tile_index: int
    location: Vector
    cycle: int = 0

    def press(self) -> int:
        """Step the state forward on button-down and return the new state."""
        self.cycle = (self.cycle + 1) % INTERSECTION_STATES
        return self.cycle

    def release(self) -> int:
        """Step the state forward on button-up and return the new state."""
        self.cycle = (self.cycle + 1) % INTERSECTION_STATES
        return self.cycle

    @property
    def turns(self) -> bool:
        """Whether a marble arriving now is sent around the bend."""
        return self.cycle >= _TURNING_FROM_STATE


class IntersectionBoard:
    """All intersections of a level, in board order, plus the auto-cursor focus."""

    def __init__(
        self,
        track: Sequence[int],
        is_intersection: Sequence[bool],
        viewport: Vector,
    ) -> None:
        if len(track) != BOARD_CELLS or len(is_intersection) != BOARD_CELLS:
            raise ValueError(
                f"track and intersection flags must each hold {BOARD_CELLS} tiles"
            )
        width, height = viewport
        self.viewport: Vector = (float(width), float(height))
        self._items: list[Intersection] = []
        self._by_position: dict[tuple[int, int], int] = {}

        for index, (value, flagged) in enumerate(zip(track, is_intersection)):
            if not flagged:
                continue
            if not 0 <= value < INTERSECTION_KINDS:
                raise ValueError(
                    f"intersection kind at tile {index} must be below "
                    f"{INTERSECTION_KINDS}, got {value}"
                )
            if len(self._items) >= MAX_INTERSECTIONS:
                raise ValueError(f"a board holds at most {MAX_INTERSECTIONS} intersections")
            position = (index % BOARD_TILES, index // BOARD_TILES)
            self._by_position[position] = len(self._items)
            self._items.append(
                Intersection(
                    kind=value,
                    position=position,
                    tile_index=index,
                    location=intersection_screen_location(index, self.viewport),
                )
            )

        self.auto_cursor = False
        self.focus = 0
        self.focus_locked = False

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    @property
    def buttons_enabled(self) -> bool:
        """Whether the per-intersection buttons respond; false in auto-cursor mode."""
        return not self.auto_cursor

    @property
    def focused(self) -> Intersection:
        """The intersection the auto-cursor currently points at."""
        if not self._items:
            raise LookupError("the board has no intersections")
        return self._items[self.focus]

    def at(self, tile: tuple[float, float]) -> Intersection:
        """The intersection on board tile ``tile``; KeyError if there is none."""
        key = (int(tile[0]), int(tile[1]))
        try:
            return self._items[self._by_position[key]]
        except KeyError:
            raise KeyError(f"no intersection at tile {key}") from None

    def nearest(self, mouse: Vector) -> int:
        """Index of the intersection whose tile centre is closest to ``mouse``.

        On a tie the earliest intersection wins.
        """
        if not self._items:
            raise LookupError("the board has no intersections")
        mx, my = mouse
        best = 0
        best_distance = math.hypot(self._items[0].location[0] - mx, self._items[0].location[1] - my)
        for index, item in enumerate(self._items[1:], start=1):
            distance = math.hypot(item.location[0] - mx, item.location[1] - my)
            if distance < best_distance:
                best, best_distance = index, distance
        return best

    def update_focus(self, mouse: Vector) -> int:
        """Move the focus to the intersection nearest ``mouse`` and return the focus.

        Nothing moves while the auto-cursor is off or the focus is locked.
        """
        if self.auto_cursor:
            candidate = self.nearest(mouse)
            if not self.focus_locked:
                self.focus = candidate
        return self.focus

    def set_auto_cursor(self, enabled: bool, mouse: Vector | None = None) -> None:
        """Switch auto-cursor mode; turning it on needs the mouse position to focus."""
        if enabled:
            if mouse is None:
                raise ValueError("the mouse position is needed to turn the auto-cursor on")
            self.auto_cursor = True
            self.update_focus(mouse)
        else:
            self.auto_cursor = False

    def press_focused(self) -> int:
        """Press the focused intersection and lock the focus until release."""
        target = self.focused
        self.focus_locked = True
        return target.press()

    def release_focused(self) -> int:
        """Release the focused intersection and unlock the focus."""
        cycle = self.focused.release()
        self.focus_locked = False
        return cycle