# src/dropfour/config.py

from __future__ import annotations

import logging
import os

WIDTH = 7
HEIGHT = 6
LINE = 4

# Win/loss sentinel; every heuristic score is clamped into [-SCORE_MAX, SCORE_MAX]
SCORE_MAX = 1_000_000_000

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so AI moves aren’t instant

# AI defaults
MINIMAX_DEPTH = int(os.environ.get("DROPFOUR_DEPTH", "4"))

LOG_LEVEL = os.environ.get("DROPFOUR_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Install one stream handler on the package loggers.
    Safe to call more than once (the CLI and the series runner both do).
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    for name in ("dropfour", "dropfour_analysis"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not any(getattr(h, "_dropfour", False) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._dropfour = True  # type: ignore[attr-defined]
            logger.addHandler(handler)
