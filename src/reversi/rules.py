"""
Placement rules

Key idea: a disk may only be placed where it encloses at least one line of opposing disks.
Everything else (passing, end of the game) follows from whether such a placement exists.

None of these functions change the board.
"""

from typing import Optional, Protocol

from src.reversi.disk import Disk
from src.reversi.position import Position, all_positions


class Board(Protocol):
    """Just the part of the board the rules need"""

    def disk_at(self, position: Position) -> Optional[Disk]: ...


Vector = tuple[int, int]

# NW, N, NE, E, SE, S, SW, W. The flipped disks are reported in this order.
DIRECTIONS: tuple[Vector, ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
)


def is_in_range(position: Position) -> bool:
    return position.is_within_bounds()


def flipped_in_direction(
    disk: Disk, position: Position, direction: Vector, board: Board
) -> list[Position]:
    """
    Raycasting along one direction
    -----

    Walk away from `position` one cell at a time and collect the opposing disks.
    * same color disk: the line is enclosed, all collected disks flip.
    * empty cell (or the edge, `disk_at` reports None there): nothing flips in this direction.
    """
    dx, dy = direction
    in_line: list[Position] = []
    current = position.shifted(dx, dy)
    while True:
        occupant = board.disk_at(current)
        if occupant is None:
            return []
        if occupant == disk:
            return in_line
        in_line.append(current)
        current = current.shifted(dx, dy)


def flipped_coordinates(disk: Disk, position: Position, board: Board) -> list[Position]:
    """
    All opposing disks that flip when `disk` is placed on `position`.
    ---

    Empty list when the cell is taken (or not on the board): the placement is illegal then.
    """
    if not is_in_range(position) or board.disk_at(position) is not None:
        return []

    flipped: list[Position] = []
    for direction in DIRECTIONS:
        flipped.extend(flipped_in_direction(disk, position, direction, board))
    return flipped


def can_place_disk(disk: Disk, position: Position, board: Board) -> bool:
    """A placement needs to flip at least one disk"""
    return len(flipped_coordinates(disk, position, board)) > 0


def valid_moves(disk: Disk, board: Board) -> list[Position]:
    """Row-major order (y outer, x inner), so a seeded random choice among them is reproducible"""
    return [
        position for position in all_positions() if can_place_disk(disk, position, board)
    ]


def has_valid_move(disk: Disk, board: Board) -> bool:
    return any(can_place_disk(disk, position, board) for position in all_positions())
