"""Credit card application evaluator applying the fixed decision rules."""

import logging
from typing import Optional

from credit_cards.config import Settings, settings as default_settings
from credit_cards.core.enums import CreditCardApplicationDecision, ValidationMode
from credit_cards.models.application import CreditCardApplication
from credit_cards.services.fraud_lookup import FraudRiskChecker
from credit_cards.services.frequent_flyer import FrequentFlyerNumberValidator

logger = logging.getLogger(__name__)


class CreditCardApplicationEvaluator:
    """
    Evaluator producing one decision per credit card application.

    Rules are applied in a fixed order and the first match wins:
    1. Fraud risk (only when a fraud checker is configured)
    2. High income auto-accept
    3. Expired validator license refers to a human without a lookup
    4. Frequent flyer lookup, any failure or rejection refers to a human
    5. Young applicants are referred
    6. Low income auto-decline
    7. Everything else is referred

    The evaluator counts the lookups its own evaluate() calls trigger for its
    whole lifetime. Its listener on the validator is held weakly, so dropping
    the evaluator ends the subscription.
    """

    def __init__(
        self,
        validator: FrequentFlyerNumberValidator,
        fraud_lookup: Optional[FraudRiskChecker] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            validator: Frequent flyer number validation service (required)
            fraud_lookup: Optional fraud risk checker, skipped when None
            settings: Thresholds to apply; defaults to the global settings

        Raises:
            ValueError: If no validator is provided
        """
        if validator is None:
            raise ValueError("A frequent flyer number validator is required")

        self._validator = validator
        self._fraud_lookup = fraud_lookup
        self._settings = settings or default_settings
        self._validator_lookup_count = 0
        self._awaiting_lookup = False
        self._validator.add_lookup_listener(self._on_validator_lookup_performed)

    @property
    def validator_lookup_count(self) -> int:
        """Number of validator lookups this evaluator triggered since construction."""
        return self._validator_lookup_count

    def _on_validator_lookup_performed(self) -> None:
        # Lookups triggered by other users of a shared validator are ignored
        if self._awaiting_lookup:
            self._validator_lookup_count += 1

    def evaluate(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """
        Evaluate an application against the decision rules.

        Args:
            application: The credit card application to evaluate

        Returns:
            The decision for the application
        """
        config = self._settings

        if self._fraud_lookup is not None and self._fraud_lookup.is_fraud_risk(
            application
        ):
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK,
                "fraud risk",
            )

        if application.gross_annual_income >= config.HIGH_INCOME_THRESHOLD:
            return self._decide(
                CreditCardApplicationDecision.AUTO_ACCEPTED, "high income"
            )

        if self._validator.license_key == config.EXPIRED_LICENSE_KEY:
            logger.warning(
                "Frequent flyer validator license expired, skipping lookup"
            )
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN, "license expired"
            )

        self._validator.validation_mode = (
            ValidationMode.DETAILED
            if application.age >= config.DETAILED_LOOKUP_MIN_AGE
            else ValidationMode.QUICK
        )

        self._awaiting_lookup = True
        try:
            is_valid_frequent_flyer_number = self._validator.is_valid(
                application.frequent_flyer_number
            )
        except Exception as e:
            # A validator fault must never produce an automated outcome
            logger.warning(f"Frequent flyer validation failed: {e}", exc_info=True)
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN,
                "validation error",
            )
        finally:
            self._awaiting_lookup = False

        if not is_valid_frequent_flyer_number:
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN,
                "invalid frequent flyer number",
            )

        if application.age <= config.AUTO_REFERRAL_MAX_AGE:
            return self._decide(
                CreditCardApplicationDecision.REFERRED_TO_HUMAN, "young applicant"
            )

        if application.gross_annual_income < config.LOW_INCOME_THRESHOLD:
            return self._decide(
                CreditCardApplicationDecision.AUTO_DECLINED, "low income"
            )

        return self._decide(CreditCardApplicationDecision.REFERRED_TO_HUMAN, "default")

    @staticmethod
    def _decide(
        decision: CreditCardApplicationDecision, reason: str
    ) -> CreditCardApplicationDecision:
        logger.debug(f"Decision {decision.value} ({reason})")
        return decision
