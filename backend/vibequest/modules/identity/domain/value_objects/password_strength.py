"""
Password Strength Value Object

Maps a strength score to its display label and color token.
"""

from dataclasses import dataclass

from ..enums import StrengthColorToken
from .base import ValueObject

_LABELS = {
    0: "Very Weak",
    1: "Weak",
    2: "Fair",
    3: "Good",
    4: "Strong",
}


def strength_label(score: int) -> str:
    """Human-readable label; scores above 4 read "Very Strong"."""
    if score <= 0:
        return _LABELS[0]
    return _LABELS.get(score, "Very Strong")


def strength_color_token(score: int) -> StrengthColorToken:
    if score <= 1:
        return StrengthColorToken.DANGER
    if score == 2:
        return StrengthColorToken.WARNING
    if score == 3:
        return StrengthColorToken.GOOD
    if score == 4:
        return StrengthColorToken.STRONG
    return StrengthColorToken.STRONGEST


@dataclass(frozen=True)
class PasswordStrength(ValueObject):
    """Value object wrapping a strength score for presentation."""

    score: int

    @property
    def label(self) -> str:
        return strength_label(self.score)

    @property
    def color_token(self) -> StrengthColorToken:
        return strength_color_token(self.score)

    def is_strong(self, min_score: int = 3) -> bool:
        return self.score >= min_score
