"""Logging helpers."""

from __future__ import annotations

import logging
import sys

from ..config import LOGGER_NAME


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it named *name*."""

    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def ensure_console_logger(
    logger: logging.Logger,
    handler_name: str,
    *,
    level: int = logging.INFO,
) -> None:
    """Install a named stderr handler on *logger* once; later calls update its level."""

    logger.setLevel(level)
    for handler in logger.handlers:
        if getattr(handler, "name", None) == handler_name:
            handler.setLevel(level)
            return
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.name = handler_name
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)


__all__ = ["ensure_console_logger", "get_logger"]
