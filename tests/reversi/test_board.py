"""Unit tests for /src/reversi/board.py"""

from typing import Callable

import pytest

from src.core.exceptions import OutOfRangeError
from src.reversi.board import Board
from src.reversi.disk import Disk
from src.reversi.position import BOARD_DIMENSIONS, Position, all_positions

BoardFactory = Callable[[list[str]], Board]


# -- CREATION LOGIC ---
def test_new_board_is_empty() -> None:
    board = Board()
    assert all(board.disk_at(position) is None for position in all_positions())
    assert board.count_disks(Disk.DARK) == 0
    assert board.count_disks(Disk.LIGHT) == 0


def test_reset_places_the_four_starting_disks() -> None:
    """Light on (3,3) and (4,4), dark on (4,3) and (3,4). Nothing else."""
    board = Board()
    board.reset()

    assert board.disks == {
        Position(3, 3): Disk.LIGHT,
        Position(4, 3): Disk.DARK,
        Position(3, 4): Disk.DARK,
        Position(4, 4): Disk.LIGHT,
    }
    assert board.count_disks(Disk.DARK) == 2
    assert board.count_disks(Disk.LIGHT) == 2


def test_reset_clears_previous_disks_and_is_idempotent() -> None:
    board = Board()
    board.set_disk(Disk.DARK, Position(0, 0))
    board.reset()
    once = board.copy()
    board.reset()

    assert board.disk_at(Position(0, 0)) is None
    assert board == once
    assert board == Board.initial()


# -- SETTING DISKS ---
def test_set_disk_overwrites() -> None:
    board = Board()
    board.set_disk(Disk.DARK, Position(2, 6))
    assert board.disk_at(Position(2, 6)) == Disk.DARK

    board.set_disk(Disk.LIGHT, Position(2, 6))
    assert board.disk_at(Position(2, 6)) == Disk.LIGHT
    assert len(board.disks) == 1


@pytest.mark.parametrize(
    "position",
    [
        Position(-1, 0),
        Position(0, -1),
        Position(BOARD_DIMENSIONS[0], 0),
        Position(0, BOARD_DIMENSIONS[1]),
    ],
)
def test_set_disk_out_of_range(position: Position) -> None:
    """A programming error: raise, and leave the board alone"""
    board = Board()
    with pytest.raises(OutOfRangeError):
        board.set_disk(Disk.DARK, position)
    assert board.disks == {}


def test_set_disks_checks_all_positions_first() -> None:
    board = Board()
    with pytest.raises(OutOfRangeError):
        board.set_disks(Disk.LIGHT, [Position(1, 1), Position(8, 8)])
    assert board.disks == {}

    board.set_disks(Disk.LIGHT, [Position(1, 1), Position(2, 2)])
    assert board.count_disks(Disk.LIGHT) == 2


def test_disk_at_outside_the_board_is_empty() -> None:
    """Reading is never an error, the ray search walks off the board all the time"""
    board = Board.initial()
    assert board.disk_at(Position(-1, -1)) is None
    assert board.disk_at(Position(8, 3)) is None


# -- COUNTING ---
def test_side_with_more_disks(board_from_rows: BoardFactory) -> None:
    board = board_from_rows(["xxo"])
    assert board.side_with_more_disks() == Disk.DARK

    board = board_from_rows(["xoo", "o"])
    assert board.side_with_more_disks() == Disk.LIGHT


def test_side_with_more_disks_on_an_empty_board() -> None:
    assert Board().side_with_more_disks() is None


def test_full_board_tie() -> None:
    """Fill all 64 cells alternating dark/light in row-major order"""
    board = Board()
    for index, position in enumerate(all_positions()):
        board.set_disk(Disk.DARK if index % 2 == 0 else Disk.LIGHT, position)

    assert board.count_disks(Disk.DARK) == 32
    assert board.count_disks(Disk.LIGHT) == 32
    assert board.side_with_more_disks() is None


def test_copy_is_independent() -> None:
    board = Board.initial()
    copied = board.copy()
    copied.set_disk(Disk.DARK, Position(0, 0))

    assert board.disk_at(Position(0, 0)) is None
    assert copied != board
