import math

import pytest

from marblerail.turning import ARC_LENGTH, Direction, Marble

ENTRY = {
    Direction.UP: (5.0, 5.49),
    Direction.RIGHT: (4.51, 5.0),
    Direction.DOWN: (5.0, 4.51),
    Direction.LEFT: (5.49, 5.0),
}

TURN_CASES = [
    (Direction.UP, False, 4, Direction.RIGHT),
    (Direction.UP, True, 0, Direction.RIGHT),
    (Direction.UP, False, 5, Direction.LEFT),
    (Direction.RIGHT, False, 5, Direction.DOWN),
    (Direction.RIGHT, True, 2, Direction.DOWN),
    (Direction.RIGHT, False, 6, Direction.UP),
    (Direction.DOWN, False, 6, Direction.LEFT),
    (Direction.DOWN, True, 6, Direction.LEFT),
    (Direction.DOWN, False, 3, Direction.RIGHT),
    (Direction.LEFT, False, 3, Direction.UP),
    (Direction.LEFT, True, 4, Direction.UP),
    (Direction.LEFT, False, 4, Direction.DOWN),
]


@pytest.mark.parametrize(
    "direction, movement",
    [
        (Direction.UP, (0, -1)),
        (Direction.RIGHT, (1, 0)),
        (Direction.DOWN, (0, 1)),
        (Direction.LEFT, (-1, 0)),
    ],
)
def test_direction_movement(direction, movement):
    assert direction.movement == movement
    assert Marble((0, 0), direction).movement == movement


def test_advance_moves_along_movement():
    marble = Marble((2.0, 3.0), Direction.LEFT)
    result = marble.advance(0.25)
    assert result == (1.75, 3.0)
    assert marble.position == result


def test_advance_with_zero_movement_stays_put():
    marble = Marble((2.0, 3.0), Direction.UP, movement=(0, 0))
    marble.advance(1.0)
    assert marble.position == (2.0, 3.0)


def test_default_center_is_nearest_tile():
    marble = Marble((-1, 7), Direction.RIGHT)
    assert marble.center == (-1, 7)


def test_start_turn_marks_turning_and_starts_at_pivot():
    marble = Marble(ENTRY[Direction.RIGHT], Direction.RIGHT)
    drawn = marble.start_turn(False, 5)
    assert marble.turning is True
    assert marble.pivot == (4.5, 5.0)
    assert drawn[0] == pytest.approx(marble.position[0], abs=0.02)
    assert drawn[1] == pytest.approx(marble.position[1], abs=0.02)


def test_pivot_left_of_board_uses_negative_half():
    marble = Marble((-0.4, 3.0), Direction.RIGHT)
    marble.start_turn(False, 5)
    assert marble.pivot[0] == -0.5


def test_pivot_above_board_uses_negative_half():
    marble = Marble((3.0, -0.4), Direction.DOWN)
    marble.start_turn(False, 6)
    assert marble.pivot[1] == -0.5


def test_unknown_turn_raises():
    marble = Marble((1.0, 1.0), Direction.UP, turn=9)
    with pytest.raises(ValueError):
        marble.turn_step()


@pytest.mark.parametrize("direction, is_intersection, track_value, exit_direction", TURN_CASES)
def test_bend_follows_quarter_circle_and_exits(direction, is_intersection, track_value, exit_direction):
    marble = Marble(ENTRY[direction], direction)
    marble.start_turn(is_intersection, track_value)
    pivot = marble.pivot
    ex, ey = exit_direction.movement
    centre = (pivot[0] + 0.5 * ex, pivot[1] + 0.5 * ey)

    steps = 0
    while marble.turning:
        assert steps < 100
        marble.advance(0.05)
        drawn = marble.turn_step()
        if marble.turning:
            radius = math.hypot(drawn[0] - centre[0], drawn[1] - centre[1])
            assert radius == pytest.approx(0.5, abs=1e-4)
        steps += 1

    assert marble.direction is exit_direction
    assert marble.movement == exit_direction.movement
    axis_across = 0 if ex else 1
    axis_along = 1 - axis_across
    assert marble.position[axis_along] == int(marble.position[axis_along])
    assert marble.position[axis_across] % 1 == pytest.approx(0.5)


@pytest.mark.parametrize("direction, is_intersection, track_value, exit_direction", TURN_CASES)
def test_bend_is_continuous_at_its_end(direction, is_intersection, track_value, exit_direction):
    marble = Marble(ENTRY[direction], direction)
    marble.start_turn(is_intersection, track_value)
    travel = direction.movement
    pivot = marble.pivot

    almost = ARC_LENGTH - 1e-6
    marble.position = (pivot[0] + travel[0] * almost, pivot[1] + travel[1] * almost)
    near_end = marble.turn_step()
    assert marble.turning is True

    marble.position = (pivot[0] + travel[0] * ARC_LENGTH, pivot[1] + travel[1] * ARC_LENGTH)
    final = marble.turn_step()
    assert marble.turning is False
    assert final == marble.position
    assert near_end[0] == pytest.approx(final[0], abs=1e-3)
    assert near_end[1] == pytest.approx(final[1], abs=1e-3)


def test_intersection_and_plain_bend_codes_agree():
    plain = Marble(ENTRY[Direction.LEFT], Direction.LEFT)
    crossing = Marble(ENTRY[Direction.LEFT], Direction.LEFT)
    assert plain.start_turn(False, 3) == crossing.start_turn(True, 4)
    assert plain.turn == crossing.turn