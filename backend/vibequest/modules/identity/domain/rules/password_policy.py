"""
Password Policy

Business rules for password validation and strength requirements.

A password is evaluated against nine independent checks. The result is
valid only when every check passes; error messages explain failures but
never decide validity.
"""

import re
from typing import Any

from vibequest.core.config import PasswordPolicyConfig
from vibequest.core.logging import get_logger

from ..constants import COMMON_PASSWORDS, PasswordPolicyMessages
from ..enums import PasswordCheck
from ..interfaces.strength_estimator import IPasswordStrengthEstimator
from ..value_objects.password_candidate import PasswordCandidate
from ..value_objects.password_checks import PasswordChecks
from ..value_objects.password_validation_result import PasswordValidationResult
from ..value_objects.user_identity_hints import UserIdentityHints
from .base import BusinessRule, PolicyViolation, ViolationSeverity

logger = get_logger(__name__)

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^A-Za-z0-9]")


class PasswordPolicy(BusinessRule):
    """Password strength and policy validation."""

    def __init__(
        self,
        estimator: IPasswordStrengthEstimator,
        config: PasswordPolicyConfig | None = None,
        common_passwords: frozenset[str] = COMMON_PASSWORDS,
    ):
        super().__init__("PasswordPolicy")
        self.estimator = estimator
        self.config = config or PasswordPolicyConfig()
        self.common_passwords = common_passwords

    def evaluate(
        self, password: str, user_info: UserIdentityHints | None = None
    ) -> PasswordValidationResult:
        """
        Evaluate a password against every check.

        Args:
            password: Password exactly as typed, surrounding whitespace included
            user_info: Optional email and display name of the user

        Returns:
            PasswordValidationResult: Check outcomes, ordered error messages
            and the estimator score
        """
        candidate = PasswordCandidate(password)
        hints = user_info or UserIdentityHints()
        trimmed = candidate.trimmed
        normalized = candidate.normalized

        email_local_part = hints.email_local_part
        display_name = hints.normalized_display_name
        contains_email = bool(email_local_part) and email_local_part in normalized
        contains_name = bool(display_name) and display_name in normalized

        estimate = self.estimator.estimate(trimmed, hints.estimator_inputs())

        checks = PasswordChecks(
            no_whitespace=not candidate.has_whitespace(),
            min_length=len(trimmed) >= self.config.min_length,
            has_uppercase=_UPPERCASE.search(trimmed) is not None,
            has_lowercase=_LOWERCASE.search(trimmed) is not None,
            has_number=_DIGIT.search(trimmed) is not None,
            has_symbol=_SYMBOL.search(trimmed) is not None,
            not_common=normalized not in self.common_passwords,
            not_user_info=not (contains_email or contains_name),
            strong_enough=estimate.meets(self.config.min_strength_score),
        )

        errors = self._collect_errors(checks, contains_email, contains_name)
        result = PasswordValidationResult.from_checks(checks, errors, estimate.score)

        logger.debug(
            "Password evaluated",
            is_valid=result.is_valid,
            failed_checks=[check.value for check in result.failed_checks],
            score=result.score,
        )

        return result

    def validate(
        self, password: str, user_info: UserIdentityHints | None = None
    ) -> list[PolicyViolation]:
        """Validate password against policy, one violation per failed check."""
        result = self.evaluate(password, user_info)
        return self.violations_for(result)

    def is_compliant(
        self, password: str, user_info: UserIdentityHints | None = None
    ) -> bool:
        return self.evaluate(password, user_info).is_valid

    def violations_for(self, result: PasswordValidationResult) -> list[PolicyViolation]:
        """Describe every failed check of an evaluation as a policy violation."""
        violations = []

        for check in result.failed_checks:
            if check == PasswordCheck.NOT_USER_INFO:
                violations.extend(self._identity_violations(result))
                continue

            current_value: Any = False
            expected_value: Any = True
            if check == PasswordCheck.STRONG_ENOUGH:
                current_value = result.score
                expected_value = self.config.min_strength_score

            violations.append(self.create_violation(
                rule_name=check.value,
                description=self._message_for(check),
                severity=ViolationSeverity.ERROR,
                current_value=current_value,
                expected_value=expected_value,
            ))

        return violations

    def _collect_errors(
        self, checks: PasswordChecks, contains_email: bool, contains_name: bool
    ) -> list[str]:
        errors = []

        for check in PasswordCheck:
            if check in (PasswordCheck.NOT_USER_INFO, PasswordCheck.STRONG_ENOUGH):
                continue
            if not checks.get(check):
                errors.append(self._message_for(check))

        if contains_email:
            errors.append(PasswordPolicyMessages.CONTAINS_EMAIL)
        if contains_name:
            errors.append(PasswordPolicyMessages.CONTAINS_NAME)

        # A weak score is only reported on its own; other failures already explain it.
        if not checks.strong_enough and not errors:
            errors.append(PasswordPolicyMessages.NOT_STRONG_ENOUGH)

        return errors

    def _identity_violations(self, result: PasswordValidationResult) -> list[PolicyViolation]:
        violations = []
        for hint, message in (
            ("email", PasswordPolicyMessages.CONTAINS_EMAIL),
            ("display_name", PasswordPolicyMessages.CONTAINS_NAME),
        ):
            if message in result.errors:
                violations.append(self.create_violation(
                    rule_name=PasswordCheck.NOT_USER_INFO.value,
                    description=message,
                    severity=ViolationSeverity.ERROR,
                    current_value=True,
                    expected_value=False,
                    context={"hint": hint},
                ))
        return violations

    def _message_for(self, check: PasswordCheck) -> str:
        messages = {
            PasswordCheck.NO_WHITESPACE: PasswordPolicyMessages.NO_WHITESPACE,
            PasswordCheck.MIN_LENGTH: PasswordPolicyMessages.MIN_LENGTH.format(
                min_length=self.config.min_length
            ),
            PasswordCheck.HAS_UPPERCASE: PasswordPolicyMessages.HAS_UPPERCASE,
            PasswordCheck.HAS_LOWERCASE: PasswordPolicyMessages.HAS_LOWERCASE,
            PasswordCheck.HAS_NUMBER: PasswordPolicyMessages.HAS_NUMBER,
            PasswordCheck.HAS_SYMBOL: PasswordPolicyMessages.HAS_SYMBOL,
            PasswordCheck.NOT_COMMON: PasswordPolicyMessages.NOT_COMMON,
            PasswordCheck.NOT_USER_INFO: PasswordPolicyMessages.CONTAINS_EMAIL,
            PasswordCheck.STRONG_ENOUGH: PasswordPolicyMessages.NOT_STRONG_ENOUGH,
        }
        return messages[check]
