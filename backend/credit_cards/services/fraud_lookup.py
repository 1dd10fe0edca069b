"""Fraud risk checking for credit card applications."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from credit_cards.config import Settings, settings as default_settings
from credit_cards.models.application import CreditCardApplication

FraudCheck = Callable[[CreditCardApplication], bool]


def last_name_marker_check(marker: str) -> FraudCheck:
    """Build a check flagging applications whose last name equals marker."""

    def check(application: CreditCardApplication) -> bool:
        return application.last_name == marker

    return check


class FraudRiskChecker(ABC):
    """Capability interface for anything that can flag a fraud risk."""

    @abstractmethod
    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        """Return True if the application should be treated as a fraud risk."""


class FraudLookup(FraudRiskChecker):
    """
    Default fraud lookup delegating to a single injectable check.

    Without an explicit check, applications are flagged when their last name
    matches the configured FRAUD_RISK_LAST_NAME marker.
    """

    def __init__(
        self,
        check: Optional[FraudCheck] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the fraud lookup.

        Args:
            check: Strategy deciding whether an application is a fraud risk
            settings: Settings used to build the default check
        """
        config = settings or default_settings
        self._check = check or last_name_marker_check(config.FRAUD_RISK_LAST_NAME)

    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        return bool(self._check(application))
