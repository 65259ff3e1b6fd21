"""The Game board only knows where the disks are. Whether a placement is allowed is decided in rules.py"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterable, Optional, Self

from src.core.exceptions import OutOfRangeError
from src.reversi.disk import Disk
from src.reversi.position import BOARD_DIMENSIONS, Position


@dataclass
class Board:
    # empty cells are simply absent from the mapping
    disks: dict[Position, Disk] = field(default_factory=dict)

    @classmethod
    def initial(cls) -> Self:
        """Board in the standard starting position"""
        board = cls()
        board.reset()
        return board

    def reset(self) -> None:
        """
        Clear the board and put the four starting disks in the center.
        ---

        Light on the top-left and bottom-right center cells, Dark on the other two:
        for 8x8 that is Light on (3,3) and (4,4), Dark on (4,3) and (3,4).
        """
        self.disks = {}
        width, height = BOARD_DIMENSIONS
        self.set_disk(Disk.LIGHT, Position(width // 2 - 1, height // 2 - 1))
        self.set_disk(Disk.DARK, Position(width // 2, height // 2 - 1))
        self.set_disk(Disk.DARK, Position(width // 2 - 1, height // 2))
        self.set_disk(Disk.LIGHT, Position(width // 2, height // 2))

    def set_disk(self, disk: Disk, position: Position) -> None:
        """Place (or overwrite) a disk. Out of range coordinates are a bug in the caller."""
        if not position.is_within_bounds():
            raise OutOfRangeError(
                f"Cannot set disk at ({position.x}, {position.y}). Board is {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]}."
            )
        self.disks[position] = disk

    def set_disks(self, disk: Disk, positions: Iterable[Position]) -> None:
        """Set several cells to the same color. All positions are checked before anything changes."""
        positions = list(positions)
        outside = [p for p in positions if not p.is_within_bounds()]
        if outside:
            raise OutOfRangeError(
                f"Cannot set disks outside of the board: {[(p.x, p.y) for p in outside]}"
            )
        for position in positions:
            self.disks[position] = disk

    def disk_at(self, position: Position) -> Optional[Disk]:
        """Occupant of the cell. Outside of the board is treated like an empty cell (the ray search relies on this)."""
        return self.disks.get(position)

    def count_disks(self, disk: Disk) -> int:
        return sum(1 for occupant in self.disks.values() if occupant == disk)

    def side_with_more_disks(self) -> Optional[Disk]:
        """None on a tie"""
        dark_count = self.count_disks(Disk.DARK)
        light_count = self.count_disks(Disk.LIGHT)
        if dark_count == light_count:
            return None
        return Disk.DARK if dark_count > light_count else Disk.LIGHT

    def copy(self) -> Self:
        return deepcopy(self)
