"""zxcvbn password strength estimator implementation."""

from typing import Any

from zxcvbn import zxcvbn

from vibequest.core.config import PasswordPolicyConfig
from vibequest.core.errors import StrengthEstimationError
from vibequest.core.logging import get_logger
from vibequest.modules.identity.domain.interfaces import IPasswordStrengthEstimator
from vibequest.modules.identity.domain.value_objects import StrengthEstimate

logger = get_logger(__name__)


class ZxcvbnStrengthEstimator(IPasswordStrengthEstimator):
    """
    Estimates password guessability with zxcvbn.

    zxcvbn rejects input longer than its ``max_length``, so only a prefix of
    that length is scored; the policy still sees the full password.
    """

    def __init__(self, max_length: int | None = None):
        self.max_length = max_length or PasswordPolicyConfig().estimator_max_length

    def estimate(self, password: str, user_inputs: list[str]) -> StrengthEstimate:
        if not password:
            return StrengthEstimate(score=0)

        report = zxcvbn(
            password[: self.max_length],
            user_inputs=list(user_inputs),
            max_length=self.max_length,
        )
        return self._to_estimate(report)

    def _to_estimate(self, report: dict[str, Any]) -> StrengthEstimate:
        score = report.get("score")
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            logger.error("zxcvbn returned an unusable score", score_type=type(score).__name__)
            raise StrengthEstimationError(
                "Strength estimator returned an invalid score",
                details={"estimator": "zxcvbn"},
            )

        feedback = report.get("feedback") or {}
        return StrengthEstimate(
            score=score,
            warning=feedback.get("warning") or "",
            suggestions=tuple(feedback.get("suggestions") or ()),
        )
