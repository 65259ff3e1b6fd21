import pytest
from pydantic import ValidationError

from src.api.models import ChangePlayerModeRequest, PlaceDiskRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PlayerMode


# -- Validation - PlaceDiskRequest --
@pytest.mark.parametrize("x, y", [(0, 0), (7, 7), (3, 5)])
def test_valid_positions(x: int, y: int) -> None:
    request = PlaceDiskRequest(x=x, y=y)
    assert (request.x, request.y) == (x, y)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 0), (0, 8)])
def test_positions_outside_the_board(x: int, y: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = PlaceDiskRequest(x=x, y=y)


def test_position_must_be_a_number() -> None:
    """Type errors are still reported by pydantic itself"""
    with pytest.raises(ValidationError):
        _ = PlaceDiskRequest(x="left", y=0)  # type: ignore[arg-type]


# -- Validation - ChangePlayerModeRequest --
def test_player_mode_request_from_strings() -> None:
    request = ChangePlayerModeRequest.model_validate({"color": "light", "mode": "automated"})
    assert request.color == Color.LIGHT
    assert request.mode == PlayerMode.AUTOMATED


def test_unknown_player_mode() -> None:
    with pytest.raises(ValidationError):
        _ = ChangePlayerModeRequest.model_validate({"color": "light", "mode": "robot"})
