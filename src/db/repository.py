"""Protocol for the storage provider (implemented for a plain text file and for SQL Alchemy)"""

from typing import Protocol


class GameStateStore(Protocol):
    """
    Persistence of ONE saved game, in the text format of src/reversi/codec.py.
    The store does not look inside the text. Failures are raised as StorageError.
    """

    def save_game(self, snapshot: str) -> None:
        """Replace the saved game."""
        ...

    def load_game(self) -> str:
        """Return the saved game. StorageError if there is none or it cannot be read."""
        ...
