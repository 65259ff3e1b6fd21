"""Composition of a ReversiService from Settings"""

from typing import Optional

from src.core.config import Settings
from src.core.logger import configure_logging
from src.db.database import create_db_engine, create_session_factory
from src.db.file_store import FileGameStateStore
from src.db.repository import GameStateStore
from src.db.sql_repository import SQLGameStateStore
from src.services.reversi_service import EventListener, ReversiService
from src.services.scheduling import Scheduler


def create_store(settings: Settings, use_database: bool = False) -> GameStateStore:
    """`save_path` file by default, the `database_url` database with `use_database`."""
    if use_database:
        session_factory = create_session_factory(create_db_engine(settings))
        return SQLGameStateStore(session_factory())
    return FileGameStateStore(settings.save_path)


def create_reversi_service(
    settings: Optional[Settings] = None,
    use_database: bool = False,
    scheduler: Optional[Scheduler] = None,
    listener: Optional[EventListener] = None,
) -> ReversiService:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    return ReversiService(
        create_store(settings, use_database),
        settings=settings,
        scheduler=scheduler,
        listener=listener,
    )
