"""
Password Feedback Service

Builds the feedback shown next to a password field: the requirement
checklist derived from a validation result, and a quick composition-only
strength estimate for screens where no strength estimator is wired.
"""

import re
from dataclasses import dataclass

from vibequest.core.config import PasswordPolicyConfig

from ..constants import PasswordRequirementLabels, QuickStrengthHints
from ..enums import PasswordCheck
from ..value_objects.password_validation_result import PasswordValidationResult
from ..value_objects.user_identity_hints import UserIdentityHints

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class RequirementItem:
    """One line of the password requirement checklist."""

    check: PasswordCheck
    label: str
    checked: bool

    @property
    def key(self) -> str:
        return self.check.camel_name


@dataclass(frozen=True)
class PasswordStrengthReport:
    """Result of the composition-only strength evaluation."""

    score: int
    feedback: str
    meets_policy: bool


def build_requirement_checklist(
    result: PasswordValidationResult,
    user_info: UserIdentityHints | None = None,
    config: PasswordPolicyConfig | None = None,
) -> list[RequirementItem]:
    """
    Build the ordered requirement checklist for a validation result.

    The identity item is only listed when the caller supplied an email or a
    display name.
    """
    config = config or PasswordPolicyConfig()
    checks = result.checks

    items = [
        RequirementItem(
            PasswordCheck.MIN_LENGTH,
            PasswordRequirementLabels.MIN_LENGTH.format(min_length=config.min_length),
            checks.min_length,
        ),
        RequirementItem(
            PasswordCheck.HAS_UPPERCASE,
            PasswordRequirementLabels.HAS_UPPERCASE,
            checks.has_uppercase,
        ),
        RequirementItem(
            PasswordCheck.HAS_LOWERCASE,
            PasswordRequirementLabels.HAS_LOWERCASE,
            checks.has_lowercase,
        ),
        RequirementItem(
            PasswordCheck.HAS_NUMBER,
            PasswordRequirementLabels.HAS_NUMBER,
            checks.has_number,
        ),
        RequirementItem(
            PasswordCheck.HAS_SYMBOL,
            PasswordRequirementLabels.HAS_SYMBOL,
            checks.has_symbol,
        ),
        RequirementItem(
            PasswordCheck.NOT_COMMON,
            PasswordRequirementLabels.NOT_COMMON,
            checks.not_common,
        ),
        RequirementItem(
            PasswordCheck.STRONG_ENOUGH,
            PasswordRequirementLabels.STRONG_ENOUGH.format(
                min_score=config.min_strength_score
            ),
            checks.strong_enough,
        ),
        RequirementItem(
            PasswordCheck.NO_WHITESPACE,
            PasswordRequirementLabels.NO_WHITESPACE,
            checks.no_whitespace,
        ),
    ]

    if user_info is not None and not user_info.is_empty:
        items.append(RequirementItem(
            PasswordCheck.NOT_USER_INFO,
            PasswordRequirementLabels.NOT_USER_INFO,
            checks.not_user_info,
        ))

    return items


def evaluate_password_strength(
    password: str, config: PasswordPolicyConfig | None = None
) -> PasswordStrengthReport:
    """
    Score a password on character composition alone.

    One point each for minimum length, uppercase, lowercase, digit and
    symbol, plus a bonus point at 16 characters; capped at 5. The password
    meets policy once the uncapped score reaches 5, so the length bonus can
    stand in for one missing composition point.
    """
    config = config or PasswordPolicyConfig()
    score = 0
    hints = []

    rules = (
        (len(password) >= config.min_length,
         QuickStrengthHints.MIN_LENGTH.format(min_length=config.min_length)),
        (_UPPERCASE.search(password) is not None, QuickStrengthHints.HAS_UPPERCASE),
        (_LOWERCASE.search(password) is not None, QuickStrengthHints.HAS_LOWERCASE),
        (_DIGIT.search(password) is not None, QuickStrengthHints.HAS_NUMBER),
        (_SYMBOL.search(password) is not None, QuickStrengthHints.HAS_SYMBOL),
    )
    for passed, hint in rules:
        if passed:
            score += 1
        else:
            hints.append(hint)

    if len(password) >= QuickStrengthHints.BONUS_LENGTH:
        score += 1

    meets_policy = score >= QuickStrengthHints.MAX_SCORE

    return PasswordStrengthReport(
        score=min(score, QuickStrengthHints.MAX_SCORE),
        feedback=QuickStrengthHints.STRONG if meets_policy else ". ".join(hints),
        meets_policy=meets_policy,
    )
