"""
User Identity Hints Value Object

Identifying strings used only to reject passwords derived from the user's
own identity. Never persisted.
"""

from dataclasses import dataclass

from .base import ValueObject


@dataclass(frozen=True)
class UserIdentityHints(ValueObject):
    """Optional email and display name supplied by the caller."""

    email: str | None = None
    display_name: str | None = None

    @property
    def email_local_part(self) -> str:
        """
        Lowercased part of the email before ``@``; empty when not usable.

        An email such as ``@host`` yields an empty string, which the policy
        ignores instead of matching it against every password.
        """
        if not self.email:
            return ""
        return self.email.strip().split("@", 1)[0].lower()

    @property
    def normalized_display_name(self) -> str:
        if not self.display_name:
            return ""
        return self.display_name.strip().lower()

    @property
    def is_empty(self) -> bool:
        return not self.email and not self.display_name

    def estimator_inputs(self) -> list[str]:
        """User inputs handed to the strength estimator (full email first)."""
        return [value for value in (self.email or "", self.display_name or "") if value]
