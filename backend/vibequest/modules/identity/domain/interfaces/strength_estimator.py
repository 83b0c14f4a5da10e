"""Password Strength Estimator Interface

Domain contract for the guessability estimator consulted by the password
policy. Implementations must be local and side-effect free.
"""

from typing import Protocol, runtime_checkable

from ..value_objects.strength_estimate import StrengthEstimate


@runtime_checkable
class IPasswordStrengthEstimator(Protocol):
    """Estimates how easy a password is to guess."""

    def estimate(self, password: str, user_inputs: list[str]) -> StrengthEstimate:
        """Estimate password strength.

        Args:
            password: Trimmed password to score
            user_inputs: User-identifying strings that make a password weaker
                when it is derived from them

        Returns:
            Strength estimate with a non-negative score (0 to 4 for zxcvbn)
        """
        ...
