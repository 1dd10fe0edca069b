"""Logging setup driven by application settings."""

import logging
from typing import Optional

from credit_cards.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """
    Configure root logging for the evaluator.

    Args:
        level: Level name such as "DEBUG"; defaults to settings.LOG_LEVEL

    Returns:
        The numeric level that was applied

    Raises:
        ValueError: If the level name is not a known logging level
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric_level)
    return numeric_level
