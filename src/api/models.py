"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PlayerMode, Status
from src.reversi.position import BOARD_DIMENSIONS

BoardRow = str


# --- REQUEST MODELS ---
class PlaceDiskRequest(BaseModel):
    x: int
    y: int

    @field_validator("x")
    @classmethod
    def validate_x(cls, value: int) -> int:
        if not (0 <= value < BOARD_DIMENSIONS[0]):
            raise InvalidRequestError(
                f"x must be between 0 and {BOARD_DIMENSIONS[0] - 1}, got {value}"
            )
        return value

    @field_validator("y")
    @classmethod
    def validate_y(cls, value: int) -> int:
        if not (0 <= value < BOARD_DIMENSIONS[1]):
            raise InvalidRequestError(
                f"y must be between 0 and {BOARD_DIMENSIONS[1] - 1}, got {value}"
            )
        return value


class ChangePlayerModeRequest(BaseModel):
    color: Color
    mode: PlayerMode


# --- RESPONSE MODELS ---
class PositionResponse(BaseModel):
    x: int
    y: int


class GameResponse(BaseModel):
    """
    board: one string per row (y=0 first), "x" dark, "o" light, "-" empty
    active_color: None once the game is over
    """

    board: list[BoardRow]
    active_color: Optional[Color]
    players: dict[Color, PlayerMode]
    status: Status
    winner: Optional[Color]
    disk_counts: dict[Color, int]


class MoveResponse(BaseModel):
    color: Color
    position: PositionResponse
    flipped: list[PositionResponse]
    game: GameResponse
