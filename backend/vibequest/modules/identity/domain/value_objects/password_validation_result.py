"""
Password Validation Result Value Object

Represents the result of evaluating a password against the password policy.
"""

from dataclasses import dataclass
from typing import Any

from ..enums import PasswordCheck
from .base import ValueObject
from .password_checks import PasswordChecks
from .password_strength import PasswordStrength


@dataclass(frozen=True)
class PasswordValidationResult(ValueObject):
    """
    Value object representing a password validation result.

    ``is_valid`` always equals ``checks.all_passed``; ``errors`` only
    explains the outcome and never decides it.
    """

    is_valid: bool
    errors: tuple[str, ...]
    checks: PasswordChecks
    score: int

    def __post_init__(self) -> None:
        if self.is_valid != self.checks.all_passed:
            raise ValueError("is_valid must match the outcome of all password checks")

        if self.score < 0:
            raise ValueError("Password score cannot be negative")

    @classmethod
    def from_checks(
        cls, checks: PasswordChecks, errors: list[str] | tuple[str, ...], score: int
    ) -> "PasswordValidationResult":
        return cls(
            is_valid=checks.all_passed,
            errors=tuple(errors),
            checks=checks,
            score=score,
        )

    @classmethod
    def empty(cls) -> "PasswordValidationResult":
        """Placeholder shown before anything has been typed."""
        return cls(
            is_valid=False,
            errors=(),
            checks=PasswordChecks.none_passed(),
            score=0,
        )

    @property
    def failed_checks(self) -> list[PasswordCheck]:
        return self.checks.failed()

    @property
    def strength(self) -> PasswordStrength:
        return PasswordStrength(self.score)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "checks": self.checks.to_dict(),
            "score": self.score,
        }
