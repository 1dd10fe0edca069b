"""Service layer for credit card application evaluation."""

from credit_cards.services.evaluator import CreditCardApplicationEvaluator
from credit_cards.services.fraud_lookup import (
    FraudLookup,
    FraudRiskChecker,
    last_name_marker_check,
)
from credit_cards.services.frequent_flyer import FrequentFlyerNumberValidator

__all__ = [
    "CreditCardApplicationEvaluator",
    "FraudLookup",
    "FraudRiskChecker",
    "FrequentFlyerNumberValidator",
    "last_name_marker_check",
]
