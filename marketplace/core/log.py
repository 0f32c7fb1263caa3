"""Logging setup shared by the API process and the maintenance scripts."""

from __future__ import annotations

import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    root = logging.getLogger()
    # uvicorn/pytest install their own handlers; only the level is ours then
    if not root.handlers:
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if settings.log_file:
            handlers.append(logging.FileHandler(settings.log_file))
        logging.basicConfig(format=LOG_FORMAT, handlers=handlers)
    root.setLevel(level)
