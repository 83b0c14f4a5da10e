"""
Identity Domain Interfaces
"""

from .strength_estimator import IPasswordStrengthEstimator

__all__ = ['IPasswordStrengthEstimator']
