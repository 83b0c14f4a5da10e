"""
Response DTOs for the identity module.

Serialized with camelCase aliases (``model_dump(by_alias=True)``) to match
what the web and mobile clients consume.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vibequest.modules.identity.domain.services import RequirementItem
from vibequest.modules.identity.domain.value_objects import (
    PasswordChecks,
    PasswordValidationResult,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PasswordChecksResponse(CamelModel):
    """Outcome of each password check."""
    no_whitespace: bool
    min_length: bool
    has_uppercase: bool
    has_lowercase: bool
    has_number: bool
    has_symbol: bool
    not_common: bool
    not_user_info: bool
    strong_enough: bool

    @classmethod
    def from_checks(cls, checks: PasswordChecks) -> "PasswordChecksResponse":
        return cls(**checks.to_dict())


class RequirementItemResponse(CamelModel):
    """One checklist line."""
    key: str
    label: str
    checked: bool

    @classmethod
    def from_item(cls, item: RequirementItem) -> "RequirementItemResponse":
        return cls(key=item.key, label=item.label, checked=item.checked)


class PasswordValidationResponse(CamelModel):
    """Password validation outcome for client display."""
    is_valid: bool = Field(..., description="True only when every check passed")
    errors: list[str] = Field(default_factory=list)
    checks: PasswordChecksResponse
    score: int = Field(..., ge=0)
    strength_label: str
    strength_color: str
    requirements: list[RequirementItemResponse] = Field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        result: PasswordValidationResult,
        requirements: list[RequirementItem] | None = None,
    ) -> "PasswordValidationResponse":
        strength = result.strength
        return cls(
            is_valid=result.is_valid,
            errors=list(result.errors),
            checks=PasswordChecksResponse.from_checks(result.checks),
            score=result.score,
            strength_label=strength.label,
            strength_color=strength.color_token.value,
            requirements=[
                RequirementItemResponse.from_item(item) for item in requirements or []
            ],
        )
