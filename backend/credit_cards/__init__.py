"""Credit card application evaluation."""

from credit_cards.core.enums import CreditCardApplicationDecision, ValidationMode
from credit_cards.models.application import CreditCardApplication
from credit_cards.services import (
    CreditCardApplicationEvaluator,
    FraudLookup,
    FraudRiskChecker,
    FrequentFlyerNumberValidator,
)

__all__ = [
    "CreditCardApplication",
    "CreditCardApplicationDecision",
    "CreditCardApplicationEvaluator",
    "FraudLookup",
    "FraudRiskChecker",
    "FrequentFlyerNumberValidator",
    "ValidationMode",
]
