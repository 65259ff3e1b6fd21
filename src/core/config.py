"""Application settings. Read once (usually from the environment) and passed explicitly to whoever needs them."""

import os
from dataclasses import dataclass
from typing import Self

DEFAULT_DATABASE_URL = "sqlite:///reversi.db"
DEFAULT_SAVE_PATH = "reversi_game.txt"
# delay before an automated player moves, so a human can follow what happens
DEFAULT_AUTOMATED_MOVE_DELAY = 2.0


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    save_path: str = DEFAULT_SAVE_PATH
    automated_move_delay: float = DEFAULT_AUTOMATED_MOVE_DELAY
    autosave: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, prefix: str = "REVERSI_") -> Self:
        """Override the defaults with `REVERSI_DATABASE_URL`, `REVERSI_SAVE_PATH`, etc. when present."""
        env = os.environ
        return cls(
            database_url=env.get(f"{prefix}DATABASE_URL", DEFAULT_DATABASE_URL),
            save_path=env.get(f"{prefix}SAVE_PATH", DEFAULT_SAVE_PATH),
            automated_move_delay=float(
                env.get(
                    f"{prefix}AUTOMATED_MOVE_DELAY", str(DEFAULT_AUTOMATED_MOVE_DELAY)
                )
            ),
            autosave=_env_flag(env.get(f"{prefix}AUTOSAVE", "true")),
            log_level=env.get(f"{prefix}LOG_LEVEL", "INFO").upper(),
        )
