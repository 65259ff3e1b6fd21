"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.reversi.board import Board
from src.reversi.disk import SYMBOL_TO_DISK
from src.reversi.position import Position

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of the store independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def board_from_rows() -> Callable[[list[str]], Board]:
    """
    Call the inner function with rows drawn as text ("x" dark, "o" light, anything else empty).
    Rows start at y=0, and only the rows/cells you care about need to be given.
    """

    def _create_board(rows: list[str]) -> Board:
        board = Board()
        for y, row in enumerate(rows):
            for x, symbol in enumerate(row):
                if symbol in SYMBOL_TO_DISK:
                    board.set_disk(SYMBOL_TO_DISK[symbol], Position(x, y))
        return board

    return _create_board
