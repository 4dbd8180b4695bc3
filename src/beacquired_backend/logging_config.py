"""Logging setup for the ``beacquired_backend`` namespace."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAMESPACE = "beacquired_backend"


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """Configure the package logger with a stdout handler and an optional file.

    Calling it again replaces the previous handlers instead of stacking them,
    which matters under uvicorn's auto-reload.
    """
    logger = logging.getLogger(_LOGGER_NAMESPACE)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")


__all__ = ["setup_logging"]
