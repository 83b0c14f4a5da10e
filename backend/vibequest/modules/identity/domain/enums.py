"""
Identity Domain Enums
"""

from enum import Enum


class PasswordCheck(Enum):
    """Named password checks, in evaluation order."""
    NO_WHITESPACE = "no_whitespace"
    MIN_LENGTH = "min_length"
    HAS_UPPERCASE = "has_uppercase"
    HAS_LOWERCASE = "has_lowercase"
    HAS_NUMBER = "has_number"
    HAS_SYMBOL = "has_symbol"
    NOT_COMMON = "not_common"
    NOT_USER_INFO = "not_user_info"
    STRONG_ENOUGH = "strong_enough"

    @property
    def camel_name(self) -> str:
        """Wire name used by client applications, e.g. ``minLength``."""
        head, *tail = self.value.split("_")
        return head + "".join(part.capitalize() for part in tail)


class StrengthColorToken(str, Enum):
    """Presentation tokens for a strength score."""
    DANGER = "danger"
    WARNING = "warning"
    GOOD = "good"
    STRONG = "strong"
    STRONGEST = "strongest"
