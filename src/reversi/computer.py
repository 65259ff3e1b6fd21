"""The automated player: picks one of the legal moves uniformly at random."""

import random
from typing import Optional

from src.reversi.board import Board
from src.reversi.disk import Disk
from src.reversi.position import Position
from src.reversi.rules import valid_moves


def choose_move(
    disk: Disk, board: Board, rng: Optional[random.Random] = None
) -> Optional[Position]:
    """None only if there is no legal move (the Game never asks in that situation)"""
    moves = valid_moves(disk, board)
    if not moves:
        return None
    return (rng or random).choice(moves)
