"""Implementation of GameStateStore using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import StorageError
from src.db.schema import DBGameState

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "default"


class SQLGameStateStore:
    """Snapshot stored as text in the `game_states` table, one row per slot"""

    def __init__(self, db_session: Session, slot: str = DEFAULT_SLOT) -> None:
        self.db = db_session
        self.slot = slot

    def save_game(self, snapshot: str) -> None:
        """Insert the row for this slot on first save, update it afterwards."""
        try:
            record = self._fetch_record()
            if record is None:
                self.db.add(DBGameState(slot=self.slot, snapshot=snapshot))
            else:
                record.snapshot = snapshot
            self.db.commit()
        except SQLAlchemyError as error:
            self.db.rollback()
            raise StorageError(f"Cannot save game in slot {self.slot!r}") from error
        logger.debug("Saved game in slot %r", self.slot)

    def load_game(self) -> str:
        try:
            record = self._fetch_record()
        except SQLAlchemyError as error:
            raise StorageError(f"Cannot load game from slot {self.slot!r}") from error
        if record is None:
            raise StorageError(f"No saved game in slot {self.slot!r}")
        return record.snapshot

    def _fetch_record(self) -> DBGameState | None:
        query = select(DBGameState).where(DBGameState.slot == self.slot)
        return self.db.scalar(query)
