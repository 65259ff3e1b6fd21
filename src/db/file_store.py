"""Implementation of GameStateStore writing the snapshot to a single text file"""

import logging
import os
import tempfile
from pathlib import Path

from src.core.exceptions import CorruptDataError, StorageError

logger = logging.getLogger(__name__)


class FileGameStateStore:
    """The file holds exactly the encoded snapshot (utf-8)"""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def save_game(self, snapshot: str) -> None:
        """Written to a temporary file in the same directory, then swapped in."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".reversi-")
        except OSError as error:
            raise StorageError(f"Cannot write saved game to {self.path}") from error

        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp_file:
                tmp_file.write(snapshot)
            os.replace(tmp_name, self.path)
        except OSError as error:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write saved game to {self.path}") from error
        logger.debug("Saved game to %s", self.path)

    def load_game(self) -> str:
        try:
            with self.path.open("r", encoding="utf-8", newline="") as saved_file:
                return saved_file.read()
        except UnicodeDecodeError as error:
            raise CorruptDataError(f"Saved game in {self.path} is not utf-8 text") from error
        except OSError as error:
            raise StorageError(f"Cannot read saved game from {self.path}") from error
