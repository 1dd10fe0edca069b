"""Core enums and logging setup."""

from credit_cards.core.logging_config import configure_logging

__all__ = ["configure_logging"]
