"""Domain models for the application."""

from credit_cards.models.application import CreditCardApplication

__all__ = ["CreditCardApplication"]
