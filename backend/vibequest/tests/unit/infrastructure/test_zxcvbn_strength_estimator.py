"""
zxcvbn Estimator Unit Tests

Tests for the zxcvbn adapter with the library call replaced.
"""

import pytest

from vibequest.core.errors import StrengthEstimationError
from vibequest.modules.identity.domain.interfaces import IPasswordStrengthEstimator
from vibequest.modules.identity.domain.value_objects import StrengthEstimate
from vibequest.modules.identity.infrastructure.external import (
    zxcvbn_strength_estimator as adapter_module,
)
from vibequest.modules.identity.infrastructure.external import ZxcvbnStrengthEstimator


@pytest.fixture
def zxcvbn_calls(monkeypatch):
    calls = []

    def fake_zxcvbn(password, user_inputs=None, max_length=72):
        calls.append((password, user_inputs, max_length))
        return {"score": 2, "feedback": {"warning": "Common pattern", "suggestions": ["Add words"]}}

    monkeypatch.setattr(adapter_module, "zxcvbn", fake_zxcvbn)
    return calls


@pytest.mark.unit
class TestZxcvbnStrengthEstimator:
    """Test ZxcvbnStrengthEstimator."""

    def test_implements_interface(self):
        assert isinstance(ZxcvbnStrengthEstimator(), IPasswordStrengthEstimator)

    def test_maps_report(self, zxcvbn_calls):
        estimate = ZxcvbnStrengthEstimator().estimate("Tr0ub4dor&7Zq!", ["Maya"])

        assert estimate == StrengthEstimate(
            score=2, warning="Common pattern", suggestions=("Add words",)
        )
        assert zxcvbn_calls == [("Tr0ub4dor&7Zq!", ["Maya"], 72)]

    def test_long_password_is_truncated(self, zxcvbn_calls):
        ZxcvbnStrengthEstimator(max_length=72).estimate("Aa1!" * 125, [])

        password, _, max_length = zxcvbn_calls[0]
        assert len(password) == 72
        assert max_length == 72

    def test_empty_password_not_sent(self, zxcvbn_calls):
        assert ZxcvbnStrengthEstimator().estimate("", ["Maya"]).score == 0
        assert zxcvbn_calls == []

    @pytest.mark.parametrize("report", [
        {},
        {"score": "3"},
        {"score": -1},
        {"score": True},
    ])
    def test_invalid_report(self, report):
        with pytest.raises(StrengthEstimationError):
            ZxcvbnStrengthEstimator()._to_estimate(report)

    def test_missing_feedback(self):
        assert ZxcvbnStrengthEstimator()._to_estimate({"score": 4}) == StrengthEstimate(score=4)
