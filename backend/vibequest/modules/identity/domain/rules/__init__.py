"""
Identity Domain Business Rules
"""

from .base import BusinessRule, PolicyValidationResult, PolicyViolation, ViolationSeverity
from .password_policy import PasswordPolicy

__all__ = [
    'BusinessRule',
    'PasswordPolicy',
    'PolicyValidationResult',
    'PolicyViolation',
    'ViolationSeverity',
]
