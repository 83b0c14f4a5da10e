"""
Password Candidate Value Object

The password under evaluation, built fresh for every validation call.
"""

import re
from dataclasses import dataclass, field

from .base import ValueObject

_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True)
class PasswordCandidate(ValueObject):
    """
    Raw password as typed, plus its trimmed form.

    Every rule except the whitespace rule is evaluated against ``trimmed``.
    The value is excluded from ``repr`` and serialization.
    """

    raw: str = field(repr=False)

    @property
    def trimmed(self) -> str:
        return self.raw.strip()

    @property
    def normalized(self) -> str:
        """Lowercased trimmed value used for denylist and identity matching."""
        return self.trimmed.lower()

    def has_whitespace(self) -> bool:
        """
        Check for surrounding or interior whitespace.

        Any ``\\s`` character counts, so tabs and newlines fail as well as spaces.
        """
        return self.raw != self.trimmed or _WHITESPACE.search(self.raw) is not None
