"""Logging setup. Modules log through `logging.getLogger(__name__)`; the application calls `configure_logging` once at startup."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "src"

_console: logging.Handler | None = None


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the package logger. Calling it again only changes the level."""
    global _console

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    if _console is None:
        _console = logging.StreamHandler()
        _console.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_console)
    return logger
