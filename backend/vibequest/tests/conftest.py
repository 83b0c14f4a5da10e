"""
Global pytest configuration and fixtures.

Provides:
- Deterministic strength estimators
- Password policy instances wired to them
"""

import pytest

from vibequest.modules.identity.domain.rules import PasswordPolicy
from vibequest.modules.identity.domain.value_objects import StrengthEstimate


class FixedScoreEstimator:
    """Strength estimator returning a fixed score and recording its calls."""

    def __init__(self, score: int = 4):
        self.score = score
        self.calls: list[tuple[str, list[str]]] = []

    def estimate(self, password: str, user_inputs: list[str]) -> StrengthEstimate:
        self.calls.append((password, list(user_inputs)))
        return StrengthEstimate(score=self.score)


@pytest.fixture
def strong_estimator() -> FixedScoreEstimator:
    return FixedScoreEstimator(score=4)


@pytest.fixture
def weak_estimator() -> FixedScoreEstimator:
    return FixedScoreEstimator(score=1)


@pytest.fixture
def policy(strong_estimator) -> PasswordPolicy:
    """Policy whose estimator always reports a strong password."""
    return PasswordPolicy(strong_estimator)


@pytest.fixture
def make_policy():
    """Factory for policies backed by a fixed-score estimator."""

    def _make(score: int = 4, config=None) -> PasswordPolicy:
        return PasswordPolicy(FixedScoreEstimator(score), config)

    return _make


@pytest.fixture
def weak_policy(weak_estimator) -> PasswordPolicy:
    """Policy whose estimator always reports a weak password."""
    return PasswordPolicy(weak_estimator)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Tests against real third-party libraries")
