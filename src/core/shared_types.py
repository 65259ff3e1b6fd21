"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    AWAITING_MOVE = "awaiting move"
    AWAITING_PASS = "awaiting pass"
    GAME_OVER = "game over"


# --- NOTE the domain layer has its own Disk/PlayerMode enums (src/reversi/disk.py) carrying the wire format indices.
# --- These string versions are what the API layer sends and receives. Convert by member name.


class Color(StrEnum):
    DARK = "dark"
    LIGHT = "light"


class PlayerMode(StrEnum):
    MANUAL = "manual"
    AUTOMATED = "automated"
