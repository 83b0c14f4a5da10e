"""
Password Checks Value Object

Fixed-shape record of the nine password check outcomes.
"""

from dataclasses import dataclass

from ..enums import PasswordCheck
from .base import ValueObject


@dataclass(frozen=True)
class PasswordChecks(ValueObject):
    """Outcome of every named password check; True means the check passed."""

    no_whitespace: bool
    min_length: bool
    has_uppercase: bool
    has_lowercase: bool
    has_number: bool
    has_symbol: bool
    not_common: bool
    not_user_info: bool
    strong_enough: bool

    @classmethod
    def none_passed(cls) -> "PasswordChecks":
        return cls(**{check.value: False for check in PasswordCheck})

    @property
    def all_passed(self) -> bool:
        return all(self.get(check) for check in PasswordCheck)

    def get(self, check: PasswordCheck) -> bool:
        return getattr(self, check.value)

    def failed(self) -> list[PasswordCheck]:
        """Failed checks in evaluation order."""
        return [check for check in PasswordCheck if not self.get(check)]

    def to_dict(self, camel_case: bool = False) -> dict[str, bool]:
        return {
            (check.camel_name if camel_case else check.value): self.get(check)
            for check in PasswordCheck
        }
