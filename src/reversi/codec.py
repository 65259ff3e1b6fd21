"""
Text format of a saved game.

<header>
<row y=0>
...
<row y=7>

* header: one character for the active color ("0" dark, "1" light, "-" when the game is over),
  followed by one digit per player slot (dark first): "0" manual, "1" automated.
* rows: one character per cell, x=0 first: "x" dark, "o" light, "-" empty.

ex) a fresh game with two manual players:
000
--------
--------
--------
---ox---
---xo---
--------
--------
--------

Decoding is strict. Anything that does not match exactly raises CorruptDataError.
"""

from typing import Optional

from src.core.exceptions import CorruptDataError
from src.reversi.board import Board
from src.reversi.disk import (
    DISK_TO_SYMBOL,
    EMPTY_SYMBOL,
    SIDES,
    SYMBOL_TO_DISK,
    Disk,
    PlayerMode,
)
from src.reversi.game import GameState, PlayerSlot
from src.reversi.position import BOARD_DIMENSIONS, Position

NO_ACTIVE_COLOR = "-"
HEADER_LENGTH = 1 + len(SIDES)


def encode(state: GameState) -> str:
    """Every line (including the last row) ends with a newline"""
    lines = [_header_to_text(state)]
    width, height = BOARD_DIMENSIONS
    for y in range(height):
        lines.append(
            "".join(_cell_to_text(state.board.disk_at(Position(x, y))) for x in range(width))
        )
    return "".join(f"{line}\n" for line in lines)


def decode(text: str) -> GameState:
    """reverse operation: read a GameState from text written by `encode`"""
    width, height = BOARD_DIMENSIONS

    # a single trailing newline terminates the last row, it is not an extra (empty) row
    body = text[:-1] if text.endswith("\n") else text
    lines = body.split("\n")
    if not body or len(lines) != 1 + height:
        raise CorruptDataError(
            f"Expected a header and {height} rows, got {len(lines) if body else 0} lines."
        )

    active_color, players = _header_from_text(lines[0])

    board = Board()
    for y, row in enumerate(lines[1:]):
        if len(row) != width:
            raise CorruptDataError(
                f"Row {y} has {len(row)} cells instead of {width}: {row!r}"
            )
        for x, symbol in enumerate(row):
            disk = _cell_from_text(symbol)
            if disk is not None:
                board.set_disk(disk, Position(x, y))

    return GameState(board=board, players=players, active_color=active_color)


# --- HEADER ---
def _header_to_text(state: GameState) -> str:
    active = (
        str(state.active_color.index)
        if state.active_color is not None
        else NO_ACTIVE_COLOR
    )
    modes = "".join(str(state.player(disk).mode.value) for disk in SIDES)
    return f"{active}{modes}"


def _header_from_text(header: str) -> tuple[Optional[Disk], list[PlayerSlot]]:
    if len(header) != HEADER_LENGTH:
        raise CorruptDataError(
            f"Header should have {HEADER_LENGTH} characters, got {header!r}"
        )

    active_symbol, mode_symbols = header[0], header[1:]
    if active_symbol == NO_ACTIVE_COLOR:
        active_color = None
    else:
        active_color = Disk.from_index(_digit(active_symbol, len(Disk)))

    players = [
        PlayerSlot(disk, PlayerMode(_digit(symbol, len(PlayerMode))))
        for disk, symbol in zip(SIDES, mode_symbols)
    ]
    return active_color, players


def _digit(symbol: str, upper: int) -> int:
    """a single digit in [0, upper)"""
    if symbol not in {str(digit) for digit in range(upper)}:
        raise CorruptDataError(f"Unexpected character in header: {symbol!r}")
    return int(symbol)


# --- CELLS ---
def _cell_to_text(disk: Optional[Disk]) -> str:
    return DISK_TO_SYMBOL[disk] if disk is not None else EMPTY_SYMBOL


def _cell_from_text(symbol: str) -> Optional[Disk]:
    if symbol == EMPTY_SYMBOL:
        return None
    if symbol not in SYMBOL_TO_DISK:
        raise CorruptDataError(f"Unknown cell symbol: {symbol!r}")
    return SYMBOL_TO_DISK[symbol]
