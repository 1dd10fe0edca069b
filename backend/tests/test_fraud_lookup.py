from credit_cards.config import Settings
from credit_cards.core.enums import CreditCardApplicationDecision
from credit_cards.models.application import CreditCardApplication
from credit_cards.services.evaluator import CreditCardApplicationEvaluator
from credit_cards.services.fraud_lookup import FraudLookup, last_name_marker_check
from tests.fakes import StubValidator


def test_flags_configured_last_name_by_default():
    fraud_lookup = FraudLookup()

    assert fraud_lookup.is_fraud_risk(CreditCardApplication(last_name="Smith"))
    assert not fraud_lookup.is_fraud_risk(CreditCardApplication(last_name="Jones"))
    assert not fraud_lookup.is_fraud_risk(CreditCardApplication())


def test_marker_comes_from_settings():
    fraud_lookup = FraudLookup(
        settings=Settings(_env_file=None, FRAUD_RISK_LAST_NAME="Doe")
    )

    assert fraud_lookup.is_fraud_risk(CreditCardApplication(last_name="Doe"))
    assert not fraud_lookup.is_fraud_risk(CreditCardApplication(last_name="Smith"))


def test_injected_check_replaces_default_rule():
    seen = []

    def always_risky(application):
        seen.append(application)
        return True

    application = CreditCardApplication(last_name="Jones")

    assert FraudLookup(check=always_risky).is_fraud_risk(application)
    assert seen == [application]


def test_last_name_marker_check_is_case_sensitive():
    check = last_name_marker_check("Smith")

    assert check(CreditCardApplication(last_name="Smith"))
    assert not check(CreditCardApplication(last_name="smith"))


def test_evaluator_refers_fraud_risk_from_default_lookup():
    evaluator = CreditCardApplicationEvaluator(StubValidator(), FraudLookup())

    decision = evaluator.evaluate(CreditCardApplication(last_name="Smith"))

    assert decision == CreditCardApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK


def test_evaluator_with_stubbed_fraud_check():
    evaluator = CreditCardApplicationEvaluator(
        StubValidator(), FraudLookup(check=lambda application: True)
    )

    decision = evaluator.evaluate(CreditCardApplication())

    assert decision == CreditCardApplicationDecision.REFERRED_TO_HUMAN_FRAUD_RISK
