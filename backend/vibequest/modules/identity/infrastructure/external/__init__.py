"""External service adapters for the identity module."""

from .zxcvbn_strength_estimator import ZxcvbnStrengthEstimator

__all__ = ["ZxcvbnStrengthEstimator"]
