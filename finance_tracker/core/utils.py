"""Shared utility functions for the Finance Tracker project."""

import logging
from pathlib import Path

import colorlog

ROOT_LOGGER = "finance-tracker"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a colorized format for the project.

    Loggers under ``finance-tracker.`` propagate to the ``finance-tracker`` logger,
    which owns the console handler (and the file handler added at startup).
    """
    logger = logging.getLogger(name)
    if name.startswith(f"{ROOT_LOGGER}."):
        get_logger(ROOT_LOGGER)
        return logger
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def ensure_dir(path: str | Path) -> None:
    """Ensure a directory exists (like mkdir -p)."""
    Path(path).mkdir(parents=True, exist_ok=True)
