import pytest

from marblerail.intersections import (
    BOARD_CELLS,
    MAX_INTERSECTIONS,
    Intersection,
    IntersectionBoard,
)
from marblerail.layout import intersection_screen_location

VIEWPORT = (1920.0, 1080.0)


def make_board(tiles):
    track = [0] * BOARD_CELLS
    flags = [False] * BOARD_CELLS
    for index, kind in tiles.items():
        track[index] = kind
        flags[index] = True
    return IntersectionBoard(track, flags, VIEWPORT)


@pytest.fixture
def board():
    return make_board({16: 0, 112: 3, 200: 7})


def test_intersections_in_board_order(board):
    assert [item.tile_index for item in board] == [16, 112, 200]
    assert [item.position for item in board] == [(1, 1), (7, 7), (5, 13)]
    assert [item.kind for item in board] == [0, 3, 7]
    assert len(board) == 3


def test_locations_are_tile_centres(board):
    for item in board:
        assert item.location == intersection_screen_location(item.tile_index, VIEWPORT)


def test_press_and_release_cycle():
    item = Intersection(kind=0, position=(0, 0), tile_index=0, location=(0.0, 0.0))
    assert item.turns is False
    assert item.press() == 1
    assert item.turns is False
    assert item.release() == 2
    assert item.turns is True
    item.press()
    item.release()
    assert item.cycle == 0
    assert item.turns is False


def test_at_finds_intersection(board):
    assert board.at((7, 7)).tile_index == 112
    assert board.at((5.0, 13.0)) is board[2]


def test_at_missing_tile_raises(board):
    with pytest.raises(KeyError):
        board.at((0, 0))


def test_nearest_on_each_location(board):
    for index, item in enumerate(board):
        assert board.nearest(item.location) == index


def test_nearest_tie_prefers_first():
    board = make_board({16: 1, 18: 2})
    a, b = board[0].location, board[1].location
    midpoint = ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)
    assert board.nearest(midpoint) == 0


def test_nearest_on_empty_board_raises():
    board = make_board({})
    with pytest.raises(LookupError):
        board.nearest((0.0, 0.0))


def test_update_focus_ignored_without_auto_cursor(board):
    assert board.update_focus(board[2].location) == 0
    assert board.focus == 0
    assert board.buttons_enabled is True


def test_auto_cursor_follows_mouse(board):
    board.set_auto_cursor(True, board[1].location)
    assert board.auto_cursor is True
    assert board.buttons_enabled is False
    assert board.focus == 1
    assert board.update_focus(board[2].location) == 2
    assert board.focused is board[2]


def test_auto_cursor_needs_mouse(board):
    with pytest.raises(ValueError):
        board.set_auto_cursor(True)


def test_auto_cursor_off(board):
    board.set_auto_cursor(True, board[2].location)
    board.set_auto_cursor(False)
    assert board.auto_cursor is False
    assert board.update_focus(board[0].location) == 2


def test_focus_locked_while_pressed(board):
    board.set_auto_cursor(True, board[1].location)
    assert board.press_focused() == 1
    assert board.focus_locked is True
    assert board.update_focus(board[2].location) == 1
    assert board.release_focused() == 2
    assert board.focus_locked is False
    assert board[1].turns is True
    assert board.update_focus(board[2].location) == 2


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        IntersectionBoard([0] * 10, [False] * 10, VIEWPORT)


def test_bad_kind_raises():
    with pytest.raises(ValueError):
        make_board({5: 8})


def test_too_many_intersections_raises():
    tiles = {index: 0 for index in range(MAX_INTERSECTIONS + 1)}
    with pytest.raises(ValueError):
        make_board(tiles)


def test_maximum_intersections_allowed():
    tiles = {index: 0 for index in range(MAX_INTERSECTIONS)}
    assert len(make_board(tiles)) == MAX_INTERSECTIONS


def test_focused_on_empty_board_raises():
    board = make_board({})
    with pytest.raises(LookupError):
        board.press_focused()