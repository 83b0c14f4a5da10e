"""
Password Validation Service

Application entry point for password validation. Wires the password policy
with settings and the zxcvbn estimator, and translates between request and
response DTOs for client-facing callers.

Callers re-validating on every keystroke are expected to debounce.
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from vibequest.core.config import get_settings
from vibequest.core.logging import get_logger
from vibequest.modules.identity.application.dtos import (
    PasswordValidationResponse,
    ValidatePasswordRequest,
)
from vibequest.modules.identity.domain.interfaces import IPasswordStrengthEstimator
from vibequest.modules.identity.domain.rules import PasswordPolicy
from vibequest.modules.identity.domain.services import build_requirement_checklist
from vibequest.modules.identity.domain.value_objects import (
    PasswordValidationResult,
    UserIdentityHints,
)
from vibequest.modules.identity.infrastructure.external import ZxcvbnStrengthEstimator

logger = get_logger(__name__)

UserInfo = UserIdentityHints | Mapping[str, Any] | None


class PasswordValidationService:
    """Validates passwords and builds client responses."""

    def __init__(self, policy: PasswordPolicy):
        self._policy = policy

    @property
    def policy(self) -> PasswordPolicy:
        return self._policy

    def validate_password(
        self, password: str, user_info: UserInfo = None
    ) -> PasswordValidationResult:
        return self._policy.evaluate(password, to_identity_hints(user_info))

    def handle(self, request: ValidatePasswordRequest) -> PasswordValidationResponse:
        """
        Validate the password carried by a request.

        An empty password yields the blank placeholder result without
        running the policy, so a cleared field shows no errors.
        """
        hints = request.to_hints()

        if request.password:
            result = self._policy.evaluate(request.password, hints)
        else:
            result = PasswordValidationResult.empty()

        logger.info(
            "Password validation requested",
            request_id=str(request.request_id) if request.request_id else None,
            is_valid=result.is_valid,
            error_count=len(result.errors),
        )

        checklist = build_requirement_checklist(result, hints, self._policy.config)
        return PasswordValidationResponse.from_result(result, checklist)


def to_identity_hints(user_info: UserInfo) -> UserIdentityHints | None:
    """Accept hints as a value object or a mapping with ``email``/``displayName``."""
    if user_info is None or isinstance(user_info, UserIdentityHints):
        return user_info

    return UserIdentityHints(
        email=user_info.get("email"),
        display_name=user_info.get("display_name", user_info.get("displayName")),
    )


@lru_cache
def get_password_policy() -> PasswordPolicy:
    """Process-wide policy backed by settings and the zxcvbn estimator."""
    config = get_settings().password_policy
    return PasswordPolicy(ZxcvbnStrengthEstimator(config.estimator_max_length), config)


def validate_password(
    password: str,
    user_info: UserInfo = None,
    *,
    estimator: IPasswordStrengthEstimator | None = None,
) -> PasswordValidationResult:
    """
    Validate a password against the password policy.

    Args:
        password: Password exactly as typed
        user_info: Optional email and display name of the user
        estimator: Strength estimator to use instead of zxcvbn

    Returns:
        PasswordValidationResult: never raises for any string input
    """
    if estimator is None:
        policy = get_password_policy()
    else:
        policy = PasswordPolicy(estimator, get_settings().password_policy)

    return policy.evaluate(password, to_identity_hints(user_info))
