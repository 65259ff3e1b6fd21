"""Unit tests for src/db/database.py"""

from pathlib import Path

from sqlalchemy import inspect

from src.core.config import Settings
from src.db.database import create_db_engine, create_session_factory, get_db
from src.db.sql_repository import SQLGameStateStore


def test_engine_creates_the_tables() -> None:
    engine = create_db_engine(Settings(database_url="sqlite:///:memory:"))
    assert "game_states" in inspect(engine).get_table_names()


def test_get_db_yields_a_working_session(tmp_path: Path) -> None:
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'reversi.db'}")
    session_factory = create_session_factory(create_db_engine(settings))

    sessions = get_db(session_factory)
    db = next(sessions)
    SQLGameStateStore(db).save_game("snapshot")
    sessions.close()

    # a new session sees what the previous one committed
    with session_factory() as other:
        assert SQLGameStateStore(other).load_game() == "snapshot"
