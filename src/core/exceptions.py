"""Custom exceptions shared by all layers"""


class GameError(Exception):
    """Base class: every error raised on purpose by this application"""


class IllegalMoveError(GameError):
    """Disk placed on an occupied cell, or on a cell that flips nothing."""


class GameStateError(GameError):
    """The requested transition is not allowed in the current phase of the game."""


class OutOfRangeError(GameError):
    """Coordinates outside of the board. Indicates a programming error, callers are expected to check with the rules first."""


class CorruptDataError(GameError):
    """A saved game could not be decoded."""


class StorageError(GameError):
    """The storage provider failed to read or write a saved game."""


class InvalidRequestError(GameError):
    """Request data from the API layer failed validation."""
