"""Application configuration.

Settings are plain dataclasses filled from environment variables, with an
optional ``.env`` file for local development. Password policy thresholds
default to the product rules; the environment can only tune them.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

from vibequest.core.enums import Environment, LogFormat, LogLevel
from vibequest.core.errors import ConfigurationError, ValidationError
from vibequest.utils.validation import parse_enum, parse_integer, parse_string

E = TypeVar("E", bound=Enum)

# zxcvbn scores run from 0 to 4
MAX_STRENGTH_SCORE = 4


class EnvironmentLoader:
    """
    Typed access to environment variables.

    Entries from ``env_file`` are exported into the process environment
    unless a variable of the same name is already set.
    """

    def __init__(self, env_file: str | os.PathLike = ".env"):
        self.env_file = Path(env_file)
        self._load_env_file()

    def _load_env_file(self) -> None:
        if not self.env_file.is_file():
            return

        try:
            lines = self.env_file.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read environment file {self.env_file}: {e}"
            ) from e

        for line in lines:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = (part.strip() for part in line.split("=", 1))
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
                value = value[1:-1]

            os.environ.setdefault(key, value)

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return parse_string(os.environ.get(key, default), key)

    def get_integer(self, key: str, default: int | None = None, **bounds: int) -> int | None:
        return parse_integer(os.environ.get(key, default), key, **bounds)

    def get_enum(self, key: str, enum_class: type[E], default: E | None = None) -> E | None:
        return parse_enum(os.environ.get(key) or default, enum_class, key)


@dataclass(frozen=True)
class PasswordPolicyConfig:
    """Password policy thresholds."""

    min_length: int = 12
    min_strength_score: int = 3
    # zxcvbn refuses longer input; only the estimator sees the truncated value
    estimator_max_length: int = 72

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise ConfigurationError(
                "Password minimum length must be at least 1",
                config_key="PASSWORD_MIN_LENGTH",
            )

        if not 0 <= self.min_strength_score <= MAX_STRENGTH_SCORE:
            raise ConfigurationError(
                f"Password minimum strength score must be between 0 and {MAX_STRENGTH_SCORE}",
                config_key="PASSWORD_MIN_STRENGTH_SCORE",
            )

        if self.estimator_max_length < 1:
            raise ConfigurationError(
                "Estimator maximum length must be at least 1",
                config_key="PASSWORD_ESTIMATOR_MAX_LENGTH",
            )

    @classmethod
    def from_loader(cls, loader: EnvironmentLoader) -> "PasswordPolicyConfig":
        defaults = cls()
        return cls(
            min_length=loader.get_integer("PASSWORD_MIN_LENGTH", defaults.min_length),
            min_strength_score=loader.get_integer(
                "PASSWORD_MIN_STRENGTH_SCORE", defaults.min_strength_score
            ),
            estimator_max_length=loader.get_integer(
                "PASSWORD_ESTIMATOR_MAX_LENGTH", defaults.estimator_max_length
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_length": self.min_length,
            "min_strength_score": self.min_strength_score,
            "estimator_max_length": self.estimator_max_length,
        }


@dataclass(frozen=True)
class Settings:
    """Main application settings."""

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    # None selects the environment default
    log_format: LogFormat | None = None
    password_policy: PasswordPolicyConfig = field(default_factory=PasswordPolicyConfig)

    @classmethod
    def from_environment(cls, env_file: str | os.PathLike = ".env") -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ConfigurationError: If any variable holds an invalid value
        """
        loader = EnvironmentLoader(env_file)

        try:
            return cls(
                environment=loader.get_enum(
                    "ENVIRONMENT", Environment, Environment.DEVELOPMENT
                ),
                log_level=loader.get_enum("LOG_LEVEL", LogLevel, LogLevel.INFO),
                log_format=loader.get_enum("LOG_FORMAT", LogFormat),
                password_policy=PasswordPolicyConfig.from_loader(loader),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.message}",
                config_key=e.details.get("field"),
            ) from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "environment": self.environment.value,
            "log_level": self.log_level.value,
            "log_format": self.log_format.value if self.log_format else None,
            "password_policy": self.password_policy.to_dict(),
        }


@lru_cache
def get_settings(env_file: str = ".env") -> Settings:
    """Get cached settings instance."""
    return Settings.from_environment(env_file)
