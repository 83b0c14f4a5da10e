"""
Password DTO Unit Tests

Tests for request parsing and camelCase response serialization.
"""

import pytest
from pydantic import ValidationError

from vibequest.modules.identity.application.dtos import (
    PasswordValidationResponse,
    ValidatePasswordRequest,
)
from vibequest.modules.identity.domain.services import build_requirement_checklist
from vibequest.modules.identity.domain.value_objects import (
    PasswordValidationResult,
    UserIdentityHints,
)


@pytest.mark.unit
class TestValidatePasswordRequest:
    """Test ValidatePasswordRequest."""

    def test_camel_case_input(self):
        request = ValidatePasswordRequest.model_validate(
            {"password": " Abc ", "email": "maya@example.com", "displayName": "Maya"}
        )

        assert request.password == " Abc "
        assert request.to_hints() == UserIdentityHints(
            email="maya@example.com", display_name="Maya"
        )

    def test_snake_case_input(self):
        request = ValidatePasswordRequest(password="x", display_name="Maya")

        assert request.display_name == "Maya"
        assert request.email is None

    def test_password_required(self):
        with pytest.raises(ValidationError):
            ValidatePasswordRequest.model_validate({"email": "maya@example.com"})

    def test_password_hidden_from_repr(self):
        request = ValidatePasswordRequest(password="Tr0ub4dor&7Zq!")

        assert "Tr0ub4dor&7Zq!" not in repr(request)


@pytest.mark.unit
class TestPasswordValidationResponse:
    """Test PasswordValidationResponse."""

    def test_camel_case_output(self, weak_policy):
        hints = UserIdentityHints(display_name="Maya")
        result = weak_policy.evaluate("password", hints)
        checklist = build_requirement_checklist(result, hints)

        data = PasswordValidationResponse.from_result(result, checklist).model_dump(by_alias=True)

        assert set(data) == {
            "isValid",
            "errors",
            "checks",
            "score",
            "strengthLabel",
            "strengthColor",
            "requirements",
        }
        assert data["isValid"] is False
        assert data["score"] == 1
        assert data["strengthLabel"] == "Weak"
        assert data["strengthColor"] == "danger"
        assert data["checks"]["notCommon"] is False
        assert data["checks"]["hasLowercase"] is True
        assert data["requirements"][0] == {
            "key": "minLength",
            "label": "At least 12 characters",
            "checked": False,
        }
        assert data["requirements"][-1]["key"] == "notUserInfo"

    def test_without_requirements(self):
        response = PasswordValidationResponse.from_result(PasswordValidationResult.empty())

        assert response.requirements == []
        assert response.is_valid is False
