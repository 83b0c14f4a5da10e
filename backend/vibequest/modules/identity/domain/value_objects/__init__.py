"""
Identity Domain Value Objects
"""

from .base import ValueObject
from .password_candidate import PasswordCandidate
from .password_checks import PasswordChecks
from .password_strength import PasswordStrength, strength_color_token, strength_label
from .password_validation_result import PasswordValidationResult
from .strength_estimate import StrengthEstimate
from .user_identity_hints import UserIdentityHints

__all__ = [
    'PasswordCandidate',
    'PasswordChecks',
    'PasswordStrength',
    'PasswordValidationResult',
    'StrengthEstimate',
    'UserIdentityHints',
    'ValueObject',
    'strength_color_token',
    'strength_label',
]
