# ruff: noqa: A005
"""Structured logging built on structlog.

Every event runs through ``SensitiveDataFilter`` and ``MessageLengthFilter``
before it is rendered, so values under sensitive keys (the password being
validated, tokens, secrets) never reach the log output.

Usage:
    logger = get_logger(__name__)
    logger.info("Password evaluated", is_valid=False, score=1)
"""

import logging
import re
import sys
from dataclasses import dataclass
from typing import Any

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from vibequest.core.enums import Environment, LogFormat, LogLevel
from vibequest.core.errors import ConfigurationError

MIN_MESSAGE_LENGTH = 1000


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    include_caller: bool = False
    mask_sensitive_data: bool = True
    max_message_length: int = 10000

    def __post_init__(self) -> None:
        if self.max_message_length < MIN_MESSAGE_LENGTH:
            raise ConfigurationError(
                f"Maximum message length must be at least {MIN_MESSAGE_LENGTH} characters"
            )

    @classmethod
    def for_environment(
        cls, environment: Environment, level: LogLevel = LogLevel.INFO, **overrides: Any
    ) -> "LogConfig":
        """
        Config with the conventions of an environment.

        Development renders for the console with caller info, tests render
        plain key-value lines, and production always emits JSON at INFO or
        above with masking enforced.
        """
        if environment is Environment.DEVELOPMENT:
            defaults = {"format": LogFormat.CONSOLE, "include_caller": True}
        elif environment is Environment.TESTING:
            defaults = {"format": LogFormat.PLAIN}
        else:
            defaults = {"format": LogFormat.JSON}

        config = {"level": level, **defaults, **overrides}

        if environment.is_production:
            config.update(format=LogFormat.JSON, include_caller=False, mask_sensitive_data=True)
            if config["level"].priority < LogLevel.INFO.priority:
                config["level"] = LogLevel.INFO

        return cls(**config)


class SensitiveDataFilter:
    """structlog processor masking values whose key looks sensitive."""

    MASK = "***[MASKED]"
    PATTERN = re.compile(
        r"password|passwd|token|secret|credential|api.?key|authorization",
        re.IGNORECASE,
    )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        return self.mask(event_dict)

    def mask(self, data: dict[str, Any]) -> dict[str, Any]:
        masked = {}
        for key, value in data.items():
            if value is not None and self.PATTERN.search(key):
                masked[key] = self.MASK
            elif isinstance(value, dict):
                masked[key] = self.mask(value)
            elif isinstance(value, list):
                masked[key] = [self.mask(v) if isinstance(v, dict) else v for v in value]
            else:
                masked[key] = value
        return masked


class MessageLengthFilter:
    """structlog processor truncating oversized event messages."""

    SUFFIX = "... [TRUNCATED]"

    def __init__(self, max_length: int = 10000):
        self.max_length = max_length

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event = event_dict.get("event")
        if isinstance(event, str) and len(event) > self.max_length:
            event_dict["event"] = event[: self.max_length - len(self.SUFFIX)] + self.SUFFIX
            event_dict["message_truncated"] = True
        return event_dict


def build_processors(config: LogConfig) -> list[Processor]:
    """Processor chain for a configuration, renderer last."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if config.include_caller:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    if config.mask_sensitive_data:
        processors.append(SensitiveDataFilter())
    processors.append(MessageLengthFilter(config.max_message_length))

    processors.extend([
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ])

    if config.format is LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    elif config.format is LogFormat.CONSOLE:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.KeyValueRenderer(key_order=["event"]))

    return processors


_configured = False


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Without an explicit config, level, format and environment come from
    application settings.
    """
    global _configured  # noqa: PLW0603

    if config is None:
        from vibequest.core.config import get_settings

        settings = get_settings()
        overrides = {"format": settings.log_format} if settings.log_format else {}
        config = LogConfig.for_environment(
            settings.environment, settings.log_level, **overrides
        )

    structlog.configure(
        processors=build_processors(config),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=config.level.priority)

    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get structured logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    if not _configured:
        configure_logging()
    return structlog.stdlib.get_logger(name)


__all__ = [
    "LogConfig",
    "MessageLengthFilter",
    "SensitiveDataFilter",
    "build_processors",
    "configure_logging",
    "get_logger",
]
