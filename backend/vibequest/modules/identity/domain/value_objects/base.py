"""
Base Value Object

Provides common serialization for identity domain value objects.
"""

from abc import ABC
from dataclasses import fields
from enum import Enum
from typing import Any


class ValueObject(ABC):
    """
    Base class for all value objects.

    Subclasses are frozen dataclasses; equality and hashing come from the
    dataclass machinery, serialization from here.
    """

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            f.name: self._serialize_value(getattr(self, f.name))
            for f in fields(self)
            if f.repr
        }

    @classmethod
    def _serialize_value(cls, value: Any) -> Any:
        if isinstance(value, ValueObject):
            return value.to_dict()
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, (list, tuple, set, frozenset)):
            return [cls._serialize_value(item) for item in value]
        if isinstance(value, dict):
            return {k: cls._serialize_value(v) for k, v in value.items()}
        return value
