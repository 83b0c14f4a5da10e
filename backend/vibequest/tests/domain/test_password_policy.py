"""
Password Policy Domain Tests

Pure domain tests for the password policy rule, using deterministic
strength estimators.
"""

import pytest

from vibequest.core.config import PasswordPolicyConfig
from vibequest.modules.identity.domain.constants import PasswordPolicyMessages
from vibequest.modules.identity.domain.enums import PasswordCheck
from vibequest.modules.identity.domain.rules import PasswordPolicy, ViolationSeverity
from vibequest.modules.identity.domain.value_objects import UserIdentityHints

MIN_LENGTH_MESSAGE = PasswordPolicyMessages.MIN_LENGTH.format(min_length=12)


@pytest.mark.unit
class TestPasswordPolicyChecks:
    """Test the individual password checks."""

    def test_valid_strong_password(self, policy):
        """Test a compliant password passes every check."""
        result = policy.evaluate("Tr0ub4dor&7Zq!")

        assert result.is_valid is True
        assert result.errors == ()
        assert result.checks.all_passed
        assert result.score == 4

    def test_empty_password_does_not_raise(self, policy):
        """Test empty input is evaluated like any other string."""
        result = policy.evaluate("")

        assert result.is_valid is False
        assert result.checks.min_length is False
        assert result.checks.has_uppercase is False
        assert result.checks.has_lowercase is False
        assert result.checks.has_number is False
        assert result.checks.has_symbol is False
        assert result.errors == (
            MIN_LENGTH_MESSAGE,
            PasswordPolicyMessages.HAS_UPPERCASE,
            PasswordPolicyMessages.HAS_LOWERCASE,
            PasswordPolicyMessages.HAS_NUMBER,
            PasswordPolicyMessages.HAS_SYMBOL,
        )

    def test_all_whitespace_password(self, policy):
        """Test a password made only of spaces."""
        result = policy.evaluate("      ")

        assert result.is_valid is False
        assert result.checks.no_whitespace is False
        assert result.checks.min_length is False
        assert result.errors[0] == PasswordPolicyMessages.NO_WHITESPACE

    def test_surrounding_whitespace_rejected(self, policy):
        """Test leading and trailing spaces fail the whitespace check only."""
        result = policy.evaluate(" Abcdef123456! ")

        assert result.checks.no_whitespace is False
        assert result.checks.min_length is True
        assert result.checks.has_symbol is True
        assert result.is_valid is False
        assert result.errors == (PasswordPolicyMessages.NO_WHITESPACE,)

    @pytest.mark.parametrize("password", [
        "Correct Horse9!Battery",
        "Abcdefgh123!\t",
        "\nAbcdefgh123!",
        "Abcdef\tgh123!",
    ])
    def test_any_whitespace_rejected(self, policy, password):
        """Test interior and non-space whitespace fail the whitespace check."""
        result = policy.evaluate(password)

        assert result.checks.no_whitespace is False
        assert PasswordPolicyMessages.NO_WHITESPACE in result.errors

    def test_rules_use_trimmed_password(self, policy):
        """Test length is measured without surrounding whitespace."""
        result = policy.evaluate("  Abc123!xyz  ")

        assert result.checks.min_length is False

    def test_common_password_rejected(self, policy):
        """Test denylisted password fails the common check."""
        result = policy.evaluate("password")

        assert result.checks.not_common is False
        assert result.is_valid is False
        assert result.errors == (
            MIN_LENGTH_MESSAGE,
            PasswordPolicyMessages.HAS_UPPERCASE,
            PasswordPolicyMessages.HAS_NUMBER,
            PasswordPolicyMessages.HAS_SYMBOL,
            PasswordPolicyMessages.NOT_COMMON,
        )

    def test_common_password_match_is_case_insensitive(self, policy):
        """Test denylist comparison ignores case."""
        result = policy.evaluate("PassWord123!")

        assert result.checks.not_common is False
        assert result.errors == (PasswordPolicyMessages.NOT_COMMON,)

    def test_custom_denylist(self, strong_estimator):
        """Test the denylist can be replaced."""
        policy = PasswordPolicy(strong_estimator, common_passwords=frozenset({"tr0ub4dor&7zq!"}))

        result = policy.evaluate("Tr0ub4dor&7Zq!")

        assert result.checks.not_common is False

    def test_non_ascii_letters_count_as_symbols(self, policy):
        """Test characters outside A-Z, a-z and 0-9 satisfy the symbol rule."""
        result = policy.evaluate("Ünïcödé12345")

        assert result.checks.has_symbol is True
        assert result.checks.has_uppercase is False
        assert result.checks.has_lowercase is True

    def test_long_password_is_evaluated(self, policy):
        """Test there is no upper length bound."""
        password = "Aa1!" * 125

        result = policy.evaluate(password)

        assert len(password) == 500
        assert result.is_valid is True

    def test_min_length_boundary(self, policy):
        """Test exactly twelve characters is enough."""
        assert policy.evaluate("Abcdefgh12!x").checks.min_length is True
        assert policy.evaluate("Abcdefgh12!").checks.min_length is False

    def test_configured_min_length(self, strong_estimator):
        """Test the length threshold and its message follow configuration."""
        policy = PasswordPolicy(strong_estimator, PasswordPolicyConfig(min_length=16))

        result = policy.evaluate("Tr0ub4dor&7Zq!")

        assert result.checks.min_length is False
        assert result.errors == ("Password must be at least 16 characters",)


@pytest.mark.unit
class TestPasswordPolicyIdentityHints:
    """Test rejection of passwords derived from the user's identity."""

    def test_email_local_part_rejected(self, policy):
        """Test password containing the email local part fails."""
        hints = UserIdentityHints(email="john.doe@example.com")

        result = policy.evaluate("john.doe2024!", hints)

        assert result.checks.not_user_info is False
        assert result.is_valid is False
        assert result.errors == (
            PasswordPolicyMessages.HAS_UPPERCASE,
            PasswordPolicyMessages.CONTAINS_EMAIL,
        )

    def test_email_match_is_case_insensitive(self, policy):
        hints = UserIdentityHints(email="John.Doe@Example.com")

        result = policy.evaluate("JOHN.DOE2024!x", hints)

        assert result.checks.not_user_info is False

    def test_display_name_rejected(self, policy):
        """Test password containing the display name fails."""
        hints = UserIdentityHints(display_name="Maya")

        result = policy.evaluate("MayaRocks2024!!", hints)

        assert result.checks.not_user_info is False
        assert result.errors == (PasswordPolicyMessages.CONTAINS_NAME,)

    def test_both_hints_rejected_in_order(self, policy):
        """Test one message per violated hint, email first."""
        hints = UserIdentityHints(email="maya@example.com", display_name="Maya")

        result = policy.evaluate("MayaRocks2024!!", hints)

        assert result.errors == (
            PasswordPolicyMessages.CONTAINS_EMAIL,
            PasswordPolicyMessages.CONTAINS_NAME,
        )

    def test_unrelated_hints_pass(self, policy):
        hints = UserIdentityHints(email="john.doe@example.com", display_name="John")

        result = policy.evaluate("Tr0ub4dor&7Zq!", hints)

        assert result.checks.not_user_info is True
        assert result.is_valid is True

    def test_no_hints_is_vacuously_satisfied(self, policy):
        assert policy.evaluate("john.doe2024!").checks.not_user_info is True

    def test_empty_email_local_part_is_ignored(self, policy):
        """Test an email without a local part does not reject every password."""
        hints = UserIdentityHints(email="@example.com")

        result = policy.evaluate("Tr0ub4dor&7Zq!", hints)

        assert result.checks.not_user_info is True

    def test_estimator_receives_trimmed_password_and_hints(self, policy, strong_estimator):
        """Test the estimator is called with the trimmed password and non-empty hints."""
        hints = UserIdentityHints(email="maya@example.com", display_name="Maya")

        policy.evaluate("  Tr0ub4dor&7Zq!  ", hints)

        assert strong_estimator.calls == [
            ("Tr0ub4dor&7Zq!", ["maya@example.com", "Maya"]),
        ]

    def test_estimator_skips_missing_hints(self, policy, strong_estimator):
        policy.evaluate("Tr0ub4dor&7Zq!", UserIdentityHints(display_name="Maya"))
        policy.evaluate("Tr0ub4dor&7Zq!")

        assert strong_estimator.calls == [
            ("Tr0ub4dor&7Zq!", ["Maya"]),
            ("Tr0ub4dor&7Zq!", []),
        ]


@pytest.mark.unit
class TestPasswordPolicyStrength:
    """Test the strength estimate check and its message."""

    def test_weak_score_fails_check(self, weak_policy):
        """Test a low score alone produces the generic strength message."""
        result = weak_policy.evaluate("Tr0ub4dor&7Zq!")

        assert result.checks.strong_enough is False
        assert result.is_valid is False
        assert result.score == 1
        assert result.errors == (PasswordPolicyMessages.NOT_STRONG_ENOUGH,)

    def test_weak_score_message_suppressed_by_other_errors(self, weak_policy):
        """Test other failures suppress the generic strength message."""
        result = weak_policy.evaluate("tr0ub4dor&7zq!")

        assert result.checks.strong_enough is False
        assert result.errors == (PasswordPolicyMessages.HAS_UPPERCASE,)

    def test_weak_score_message_suppressed_by_identity_error(self, weak_policy):
        hints = UserIdentityHints(display_name="Maya")

        result = weak_policy.evaluate("MayaRocks2024!!", hints)

        assert result.errors == (PasswordPolicyMessages.CONTAINS_NAME,)

    @pytest.mark.parametrize("score,expected", [
        (0, False),
        (2, False),
        (3, True),
        (4, True),
    ])
    def test_strength_threshold(self, make_policy, score, expected):
        result = make_policy(score).evaluate("Tr0ub4dor&7Zq!")

        assert result.checks.strong_enough is expected
        assert result.is_valid is expected


@pytest.mark.unit
class TestPasswordPolicyInvariants:
    """Test properties that hold for every input."""

    PASSWORDS = [
        "",
        " ",
        "password",
        "Password123!",
        "Tr0ub4dor&7Zq!",
        " Abcdef123456! ",
        "john.doe2024!",
        "ÅÄÖåäö123456!",
        "Aa1!" * 125,
        "NoDigitsHere!!",
    ]

    @pytest.mark.parametrize("password", PASSWORDS)
    @pytest.mark.parametrize("score", [0, 3])
    def test_validity_matches_checks(self, make_policy, password, score):
        """Test is_valid is exactly the conjunction of the nine checks."""
        policy = make_policy(score)
        hints = UserIdentityHints(email="john.doe@example.com", display_name="Maya")

        result = policy.evaluate(password, hints)

        assert result.is_valid == all(result.checks.to_dict().values())
        assert result.is_valid == (not result.failed_checks)
        assert len(result.checks.to_dict()) == 9

    @pytest.mark.parametrize("password", PASSWORDS)
    def test_evaluation_is_deterministic(self, policy, password):
        hints = UserIdentityHints(email="john.doe@example.com")

        assert policy.evaluate(password, hints) == policy.evaluate(password, hints)

    @pytest.mark.parametrize("password", PASSWORDS)
    def test_errors_present_exactly_when_invalid(self, policy, password):
        result = policy.evaluate(password)

        assert result.has_errors() == (not result.is_valid)


@pytest.mark.unit
class TestPasswordPolicyViolations:
    """Test the structured violation view of an evaluation."""

    def test_violation_per_failed_check(self, policy):
        violations = policy.validate("password")

        assert [v.rule_name for v in violations] == [
            "PasswordPolicy.min_length",
            "PasswordPolicy.has_uppercase",
            "PasswordPolicy.has_number",
            "PasswordPolicy.has_symbol",
            "PasswordPolicy.not_common",
        ]
        assert all(v.severity == ViolationSeverity.ERROR for v in violations)
        assert all(v.is_blocking() for v in violations)

    def test_strength_violation_listed_even_when_message_suppressed(self, weak_policy):
        violations = weak_policy.validate("tr0ub4dor&7zq!")

        strength = [v for v in violations if v.rule_name.endswith(PasswordCheck.STRONG_ENOUGH.value)]
        assert len(strength) == 1
        assert strength[0].current_value == 1
        assert strength[0].expected_value == 3

    def test_identity_violations_carry_hint(self, policy):
        hints = UserIdentityHints(email="maya@example.com", display_name="Maya")

        violations = policy.validate("MayaRocks2024!!", hints)

        assert [v.context["hint"] for v in violations] == ["email", "display_name"]

    def test_compliance(self, policy):
        assert policy.is_compliant("Tr0ub4dor&7Zq!") is True
        assert policy.is_compliant("password") is False

    def test_validate_with_result(self, policy):
        result = policy.validate_with_result("password")

        assert result.policy_name == "PasswordPolicy"
        assert result.is_compliant is False
        assert result.has_blocking_violations()
