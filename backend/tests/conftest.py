"""Pytest configuration and fixtures."""

import pytest

from credit_cards.config import Settings
from credit_cards.services.evaluator import CreditCardApplicationEvaluator
from tests.fakes import StubValidator


@pytest.fixture
def validator():
    return StubValidator()


@pytest.fixture
def evaluator(validator):
    return CreditCardApplicationEvaluator(validator)


@pytest.fixture
def test_settings():
    return Settings(_env_file=None)
