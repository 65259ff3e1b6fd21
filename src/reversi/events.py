"""
Notifications emitted by the Game after each transition.

The Game never calls back into whoever drives it. It collects these events and the caller drains them (see Game.drain_events)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from src.reversi.board import Board
from src.reversi.disk import Disk
from src.reversi.position import Position

if TYPE_CHECKING:
    from src.reversi.game import GameState


@dataclass(frozen=True)
class Started:
    state: GameState


@dataclass(frozen=True)
class DiskSet:
    disk: Disk
    position: Position
    flipped: tuple[Position, ...]
    board: Board


@dataclass(frozen=True)
class TurnChanged:
    disk: Disk


@dataclass(frozen=True)
class Passed:
    """`disk` has no legal move and must pass. The caller acknowledges with Game.request_next_turn"""

    disk: Disk


@dataclass(frozen=True)
class Finished:
    """winner is None on a tie"""

    winner: Optional[Disk]


@dataclass(frozen=True)
class Reset:
    state: GameState


Event = Union[Started, DiskSet, TurnChanged, Passed, Finished, Reset]
