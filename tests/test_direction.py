from __future__ import annotations

import pytest

from direction import Coordinate, Direction, Heading


@pytest.mark.parametrize(
    "direction, opposite",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite_pairing(direction: Direction, opposite: Direction) -> None:
    assert direction.opposite is opposite
    assert direction.is_opposite(opposite)
    assert not direction.is_opposite(direction)


def test_coordinate_moves_by_unit_vector() -> None:
    start = Coordinate(5, 5)
    assert start.moved(Direction.UP) == (5, 4)
    assert start.moved(Direction.DOWN) == (5, 6)
    assert start.moved(Direction.LEFT) == (4, 5)
    assert start.moved(Direction.RIGHT) == (6, 5)


def test_coordinate_bounds() -> None:
    assert Coordinate(0, 19).in_bounds(20)
    assert not Coordinate(-1, 5).in_bounds(20)
    assert not Coordinate(5, 20).in_bounds(20)


def test_reverse_of_committed_heading_is_rejected() -> None:
    heading = Heading(Direction.RIGHT, Direction.RIGHT)
    new, accepted = heading.request(Direction.LEFT)
    assert accepted is False
    assert new == heading


def test_reverse_checked_against_committed_not_pending() -> None:
    heading = Heading(Direction.RIGHT, Direction.RIGHT)
    heading, accepted = heading.request(Direction.UP)
    assert accepted is True

    # DOWN is the reverse of the pending UP but not of the committed RIGHT
    heading, accepted = heading.request(Direction.DOWN)
    assert accepted is True
    assert heading.pending is Direction.DOWN

    heading, accepted = heading.request(Direction.LEFT)
    assert accepted is False
    assert heading.pending is Direction.DOWN
    assert heading.committed is Direction.RIGHT


def test_request_is_idempotent() -> None:
    heading = Heading(Direction.RIGHT, Direction.RIGHT)
    once, first = heading.request(Direction.UP)
    twice, second = once.request(Direction.UP)
    assert first is True
    assert second is False
    assert once == twice


def test_request_same_as_pending_is_noop() -> None:
    heading = Heading(Direction.RIGHT, Direction.RIGHT)
    new, accepted = heading.request(Direction.RIGHT)
    assert accepted is False
    assert new is heading


def test_latest_valid_request_wins() -> None:
    heading = Heading(Direction.UP, Direction.UP)
    heading, _ = heading.request(Direction.LEFT)
    heading, _ = heading.request(Direction.RIGHT)
    assert heading.pending is Direction.RIGHT
    assert heading.commit() == Heading(Direction.RIGHT, Direction.RIGHT)


def test_commit_without_pending_change() -> None:
    heading = Heading(Direction.DOWN, Direction.DOWN)
    assert heading.commit() is heading
