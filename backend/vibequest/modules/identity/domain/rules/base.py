"""
Base Business Rule

Business rules report failures as structured violations instead of raising.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ViolationSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def is_blocking(self) -> bool:
        return self is ViolationSeverity.ERROR


@dataclass(frozen=True)
class PolicyViolation:
    """One failed requirement of a business rule."""

    rule_name: str
    description: str
    severity: ViolationSeverity
    current_value: Any = None
    expected_value: Any = None
    context: dict[str, Any] = field(default_factory=dict)

    def is_blocking(self) -> bool:
        return self.severity.is_blocking

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_name": self.rule_name,
            "description": self.description,
            "severity": self.severity.value,
            "current_value": self.current_value,
            "expected_value": self.expected_value,
            "context": dict(self.context),
        }


@dataclass(frozen=True)
class PolicyValidationResult:
    """Violations found by one run of a business rule."""

    policy_name: str
    violations: tuple[PolicyViolation, ...]
    duration_ms: float = 0.0

    @property
    def is_compliant(self) -> bool:
        return not self.has_blocking_violations()

    def has_blocking_violations(self) -> bool:
        return any(v.is_blocking() for v in self.violations)


class BusinessRule(ABC):
    """Base class for business rules."""

    def __init__(self, rule_name: str | None = None):
        self.rule_name = rule_name or type(self).__name__

    @abstractmethod
    def validate(self, *args: Any, **kwargs: Any) -> list[PolicyViolation]:
        """Return the violations found, empty when compliant."""

    def is_compliant(self, *args: Any, **kwargs: Any) -> bool:
        return not any(v.is_blocking() for v in self.validate(*args, **kwargs))

    def validate_with_result(self, *args: Any, **kwargs: Any) -> PolicyValidationResult:
        """Validate and time the run."""
        started = time.perf_counter()
        violations = self.validate(*args, **kwargs)
        return PolicyValidationResult(
            policy_name=self.rule_name,
            violations=tuple(violations),
            duration_ms=(time.perf_counter() - started) * 1000,
        )

    def create_violation(
        self,
        rule_name: str,
        description: str,
        severity: ViolationSeverity = ViolationSeverity.ERROR,
        **values: Any,
    ) -> PolicyViolation:
        """Violation namespaced under this rule, e.g. ``PasswordPolicy.min_length``."""
        return PolicyViolation(
            rule_name=f"{self.rule_name}.{rule_name}",
            description=description,
            severity=severity,
            **values,
        )
