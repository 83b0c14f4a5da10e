"""
Identity Module

Password policy validation and strength scoring for account sign-up and
password changes.
"""

from .application.services import PasswordValidationService, validate_password
from .domain.value_objects import (
    PasswordValidationResult,
    UserIdentityHints,
    strength_color_token,
    strength_label,
)

__all__ = [
    'PasswordValidationResult',
    'PasswordValidationService',
    'UserIdentityHints',
    'strength_color_token',
    'strength_label',
    'validate_password',
]
