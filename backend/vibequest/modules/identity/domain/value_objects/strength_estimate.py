"""
Strength Estimate Value Object

Result returned by a password strength estimator.
"""

from dataclasses import dataclass

from .base import ValueObject


@dataclass(frozen=True)
class StrengthEstimate(ValueObject):
    """
    Guessability estimate for a password.

    ``score`` uses the estimator's native scale (0 to 4 for zxcvbn); lower
    means easier to guess.
    """

    score: int
    warning: str = ""
    suggestions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise ValueError("Strength score must be an integer")

        if self.score < 0:
            raise ValueError("Strength score cannot be negative")

    def meets(self, min_score: int) -> bool:
        return self.score >= min_score
