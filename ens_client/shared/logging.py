"""Logging setup for ens-client.

Handlers are attached to the ``ens_client`` package logger, never the root
logger, so an application embedding the library keeps control of its own
logging. Services log through ``ContextAdapter`` and pass names, nodes and
addresses as a ``context`` dict that both formatters render.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from ens_client.shared.errors import (
    AuthorizationOrStateError,
    GatewayErrorType,
    InvalidValueError,
    MalformedNameError,
    TransientGatewayError,
)

PACKAGE_LOGGER_NAME = "ens_client"


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LoggingConfig:
    log_level: LogLevel = LogLevel.INFO
    log_to_file: bool = False
    log_to_stdout: bool = False
    log_dir: Path | None = None
    log_filename: str = "ens-client.log"
    log_format: str = "human"

    @classmethod
    def from_environment(cls) -> "LoggingConfig":
        try:
            log_level = LogLevel(os.getenv("ENS_CLIENT_LOG_LEVEL", "INFO").upper())
        except ValueError:
            log_level = LogLevel.INFO

        config = cls(
            log_level=log_level,
            log_to_stdout=os.getenv("ENS_CLIENT_LOG_STDOUT", "").lower()
            in ("1", "true", "yes"),
            log_format="json"
            if os.getenv("ENS_CLIENT_LOG_FORMAT", "").lower() == "json"
            else "human",
        )

        log_file = os.getenv("ENS_CLIENT_LOG_FILE", "")
        if log_file:
            path = Path(log_file).expanduser()
            config.log_to_file = True
            config.log_dir = path.parent
            config.log_filename = path.name
        return config


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    context = getattr(record, "context", None)
    return context if isinstance(context, dict) else {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = _record_context(record)
        if context:
            log_data["context"] = context
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        context = _record_context(record)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            formatted = f"{formatted} [{pairs}]"
        return formatted


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that attaches a ``context`` dict to every record.

    Context is nested under ``extra["context"]`` so keys such as ``name``
    cannot collide with ``LogRecord`` attributes.
    """

    def __init__(self, logger: logging.Logger, context: dict[str, Any] | None = None):
        super().__init__(logger, context or {})

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = dict(kwargs.get("extra", {}))
        context = {**self.extra, **extra.pop("context", {})}
        if context:
            extra["context"] = context
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **kwargs: Any) -> "ContextAdapter":
        return ContextAdapter(self.logger, {**self.extra, **kwargs})


_logging_initialized = False


def setup_logging(config: LoggingConfig | None = None, force: bool = False) -> None:
    global _logging_initialized

    if _logging_initialized and not force:
        return

    if config is None:
        config = LoggingConfig.from_environment()

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(getattr(logging, config.log_level.value))
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter: logging.Formatter = (
        StructuredFormatter() if config.log_format == "json" else HumanReadableFormatter()
    )
    handlers: list[logging.Handler] = []

    if config.log_to_file:
        log_dir = config.log_dir or Path.home() / ".ens-client"
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(log_dir / config.log_filename, mode="a", encoding="utf-8")
        )

    if config.log_to_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if not handlers:
        package_logger.addHandler(logging.NullHandler())

    _logging_initialized = True


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextAdapter:
    if not _logging_initialized:
        setup_logging()
    return ContextAdapter(logging.getLogger(name), context)


def format_error_for_user(error: Exception) -> str:
    """Short text for showing an ens-client error to an end user."""
    if isinstance(error, MalformedNameError):
        return f"The name {error.name!r} is not valid: {error.reason}."
    if isinstance(error, InvalidValueError):
        return f"The value provided is not valid. {error}"
    if isinstance(error, TransientGatewayError):
        if error.error_type == GatewayErrorType.TIMEOUT:
            return "The node timed out. Try again later."
        return "The node could not be reached. Check the RPC URL and try again."
    if isinstance(error, AuthorizationOrStateError):
        return f"The registry rejected the request: {error.message}"
    return "An unexpected error occurred."


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "LogLevel",
    "LoggingConfig",
    "ContextAdapter",
    "StructuredFormatter",
    "HumanReadableFormatter",
    "setup_logging",
    "get_logger",
    "format_error_for_user",
]
