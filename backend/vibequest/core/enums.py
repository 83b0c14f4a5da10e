"""Enumerations shared by configuration and logging."""

import logging
from enum import Enum


class Environment(Enum):
    """Deployment environment."""

    DEVELOPMENT = "dev"
    TESTING = "test"
    STAGING = "staging"
    PRODUCTION = "prod"

    @property
    def is_production(self) -> bool:
        return self is Environment.PRODUCTION


class LogLevel(Enum):
    """Log levels, valued by their standard library name."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def priority(self) -> int:
        """Numeric level understood by the ``logging`` module."""
        return logging.getLevelName(self.value)


class LogFormat(Enum):
    """Rendering of emitted log lines."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"
