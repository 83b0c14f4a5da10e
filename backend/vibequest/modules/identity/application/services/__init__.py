"""Identity application services."""

from .password_validation_service import (
    PasswordValidationService,
    get_password_policy,
    to_identity_hints,
    validate_password,
)

__all__ = [
    "PasswordValidationService",
    "get_password_policy",
    "to_identity_hints",
    "validate_password",
]
