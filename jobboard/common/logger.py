"""
Logging setup for the job board client.

Controllers log through a ``ScreenLogger`` so every line carries the
screen it came from (``[screen:jobs] Error fetching jobs: ...``). Set
``DEBUG_MODE=true`` to see the mount/unmount chatter.
"""

import logging
import os
import sys
from typing import Optional

SIMPLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'


def debug_enabled() -> bool:
    return os.getenv("DEBUG_MODE", "false").lower() == "true"


class ScreenLogger(logging.LoggerAdapter):
    """Prefixes messages with ``[screen:<name>]`` when a screen is given."""

    def __init__(self, logger: logging.Logger, screen: Optional[str] = None):
        super().__init__(logger, {"screen": screen})
        self.screen = screen

    def process(self, msg, kwargs):
        if self.screen:
            msg = f"[screen:{self.screen}] {msg}"
        return msg, kwargs


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        level: DEBUG, INFO, WARNING or ERROR; defaults to ``LOG_LEVEL``
        log_format: "simple" or "json"; defaults to ``LOG_FORMAT``
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    log_format = log_format or os.getenv("LOG_FORMAT", "simple")

    if debug_enabled():
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(logging.Formatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(name: str, screen: Optional[str] = None) -> ScreenLogger:
    """Logger for ``name`` tagged with ``screen``."""
    logger = logging.getLogger(name)
    if debug_enabled():
        logger.setLevel(logging.DEBUG)
    return ScreenLogger(logger, screen)
