"""
Logging utilities for the scaler.
"""

from __future__ import annotations

import logging
import os

from pythonjsonlogger import jsonlogger

from ..interfaces import ScalerLogger

ENV_LOG_LEVEL = "ES_SCALER_LOG_LEVEL"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class StandardLogger(ScalerLogger):
    """Simple implementation based on logging."""

    def __init__(self, name: str | None = None) -> None:
        self._logger = logging.getLogger(name or __name__)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def error(self, message: str, exception: BaseException | None = None) -> None:
        if exception is None:
            self._logger.error(message)
        else:
            self._logger.error(message, exc_info=exception)

    def debug(self, message: str) -> None:
        self._logger.debug(message)


def configure_logging(level_name: str | None = None, json_format: bool = True) -> None:
    """Install a root handler, JSON formatted unless json_format is False."""
    level_name = level_name or os.environ.get(ENV_LOG_LEVEL, "INFO")
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    if json_format:
        formatter = jsonlogger.JsonFormatter(_FORMAT)
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)

    root.handlers.clear()
    root.addHandler(handler)


__all__ = ["ENV_LOG_LEVEL", "StandardLogger", "configure_logging"]
