"""Defines the disk colors and player modes, including the indices/symbols used when saving a game"""

from enum import Enum
from typing import Self


class Disk(Enum):
    # NOTE: the value is the index used in the saved game header and for looking up the player slot
    DARK = 0
    LIGHT = 1

    @property
    def index(self) -> int:
        return self.value

    @property
    def flipped(self) -> "Disk":
        """The opponent's color. Flipping twice gives back the same color."""
        return Disk.LIGHT if self == Disk.DARK else Disk.DARK

    @classmethod
    def from_index(cls, index: int) -> Self:
        return cls(index)


class PlayerMode(Enum):
    MANUAL = 0
    AUTOMATED = 1


# Dark always moves first, and the player slots are stored in this order
SIDES: tuple[Disk, ...] = (Disk.DARK, Disk.LIGHT)

SYMBOL_TO_DISK: dict[str, Disk] = {
    "x": Disk.DARK,
    "o": Disk.LIGHT,
}

DISK_TO_SYMBOL: dict[Disk, str] = {value: key for key, value in SYMBOL_TO_DISK.items()}

EMPTY_SYMBOL = "-"
