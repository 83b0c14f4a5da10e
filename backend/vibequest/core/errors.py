"""Exceptions raised by VibeQuest code.

Password policy failures are reported as data on the validation result, not
as exceptions. The classes here cover broken configuration and misbehaving
collaborators.
"""

import re
from typing import Any

_REDACTED = "***REDACTED***"
# "key" only counts with a qualifier; config_key stays visible
_SENSITIVE_KEY = re.compile(
    r"password|passwd|token|secret|credential|(api|private|secret).?key|authorization",
    re.IGNORECASE,
)


def redact(details: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``details`` with values under sensitive keys replaced."""
    clean = {}
    for name, value in details.items():
        if _SENSITIVE_KEY.search(name):
            clean[name] = _REDACTED
        elif isinstance(value, dict):
            clean[name] = redact(value)
        else:
            clean[name] = value
    return clean


class VibeQuestError(Exception):
    """
    Base exception for all VibeQuest errors.

    ``message`` is meant for operators; ``user_message`` is what a client may
    show. ``details`` are redacted whenever the error is serialized.
    """

    code = "ERROR"
    user_message = "Something went wrong"

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        if user_message is not None:
            self.user_message = user_message

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {"error": self.code, "message": self.user_message}
        if include_details and self.details:
            data["details"] = redact(self.details)
        return data

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(VibeQuestError):
    """A raw value could not be parsed."""

    code = "VALIDATION_ERROR"
    user_message = "Invalid value"

    def __init__(self, message: str, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if field:
            self.details["field"] = field


class InfrastructureError(VibeQuestError):
    code = "INFRASTRUCTURE_ERROR"


class ConfigurationError(InfrastructureError):
    """Settings are missing or out of range."""

    code = "CONFIGURATION_ERROR"
    user_message = "Service configuration issue"

    def __init__(self, message: str, config_key: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if config_key:
            self.details["config_key"] = config_key


class StrengthEstimationError(InfrastructureError):
    """The password strength estimator returned an unusable result."""

    code = "STRENGTH_ESTIMATION_ERROR"
