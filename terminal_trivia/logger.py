"""
Logger module - central loguru configuration.

Stdout belongs to the game screen, so the default stderr sink is replaced
by a daily rotated file log. If the log folder can't be written the game
runs without a log file.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from .config import LOG_DIR, LOG_LEVEL, LOG_RETENTION


def configure_logger(log_dir: Path = LOG_DIR, level: str = LOG_LEVEL) -> bool:
    """Returns False when the file sink could not be set up."""
    logger.remove()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "trivia_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention=LOG_RETENTION,
            level=level,
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        )
    except OSError as e:
        # No sinks left, so this only shows up if the caller adds one
        logger.warning(f"File logging disabled, cannot write to {log_dir}: {e}")
        return False
    return True
