"""
Identity Domain Services
"""

from .password_feedback import (
    PasswordStrengthReport,
    RequirementItem,
    build_requirement_checklist,
    evaluate_password_strength,
)

__all__ = [
    'PasswordStrengthReport',
    'RequirementItem',
    'build_requirement_checklist',
    'evaluate_password_strength',
]
