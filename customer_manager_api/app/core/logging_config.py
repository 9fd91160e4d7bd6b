"""
Logging setup for the Customer Manager API.

``setup_logging`` is called by ``create_app`` with the application
settings.  It attaches a console handler to the root logger, plus a
file handler when ``LOG_FILE`` is set.  The MongoDB driver logs every
command and heartbeat at DEBUG, so its loggers are held at WARNING
unless the app runs with ``DEBUG`` enabled.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DRIVER_LOGGERS = ("pymongo", "motor")


def _handlers(settings: Settings) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings``.

    Does nothing when the root logger already has handlers, so building
    several apps in one process (as the tests do) does not duplicate
    output.  Unknown ``log_level`` names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(settings):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if not settings.debug:
        for name in DRIVER_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
