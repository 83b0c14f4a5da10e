"""Identity application DTOs."""

from .request import BaseRequest, ValidatePasswordRequest
from .response import (
    PasswordChecksResponse,
    PasswordValidationResponse,
    RequirementItemResponse,
)

__all__ = [
    "BaseRequest",
    "PasswordChecksResponse",
    "PasswordValidationResponse",
    "RequirementItemResponse",
    "ValidatePasswordRequest",
]
