"""
Request DTOs for the identity module.
"""

from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vibequest.modules.identity.domain.value_objects import UserIdentityHints


class BaseRequest(BaseModel):
    """Base request with common fields."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    request_id: UUID | None = Field(None, description="Unique request ID for tracking")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="Request timestamp"
    )


class ValidatePasswordRequest(BaseRequest):
    """Request to validate a password as the user types it."""
    # Kept verbatim: surrounding whitespace is itself a policy failure
    password: str = Field(..., repr=False)
    email: str | None = Field(None, description="Email of the user choosing the password")
    display_name: str | None = Field(None, description="Display name of the user")

    def to_hints(self) -> UserIdentityHints:
        return UserIdentityHints(email=self.email, display_name=self.display_name)
