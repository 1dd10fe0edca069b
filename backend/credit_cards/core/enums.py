"""Core enums for type safety across the application."""

from enum import Enum


class CreditCardApplicationDecision(str, Enum):
    """Outcome of evaluating a credit card application."""

    AUTO_ACCEPTED = "AutoAccepted"
    AUTO_DECLINED = "AutoDeclined"
    REFERRED_TO_HUMAN = "ReferredToHuman"
    REFERRED_TO_HUMAN_FRAUD_RISK = "ReferredToHumanFraudRisk"

    @property
    def requires_human_review(self) -> bool:
        """Return True when the application was handed to a reviewer."""
        return self in (
            CreditCardApplicationDecision.REFERRED_TO_HUMAN,
            CreditCardApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK,
        )


class ValidationMode(str, Enum):
    """Lookup depth requested from the frequent flyer validation service."""

    QUICK = "Quick"
    DETAILED = "Detailed"
