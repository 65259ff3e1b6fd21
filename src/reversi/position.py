"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Reversi is played on 8x8. Width and height are kept separate so the rules never assume a square board.
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Position:
    """(0, 0) is the top-left cell, x grows to the right and y grows downwards"""

    x: int
    y: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (0 <= self.y < BOARD_DIMENSIONS[1])

    def shifted(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)


def all_positions() -> list[Position]:
    """Every cell of the board in row-major order (y outer, x inner)"""
    width, height = BOARD_DIMENSIONS
    return [Position(x, y) for y in range(height) for x in range(width)]
