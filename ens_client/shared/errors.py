"""Error taxonomy for ens-client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EnsClientError(Exception):
    pass


class MalformedNameError(EnsClientError, ValueError):
    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Malformed name {name!r}: {reason}")


class InvalidValueError(EnsClientError, ValueError):
    pass


class ConfigurationError(EnsClientError, ValueError):
    pass


@dataclass
class AuthorizationOrStateError(EnsClientError):
    """A rejection reported by the ledger, passed through verbatim."""

    message: str
    data: str | None = None
    transaction_hash: str | None = None

    def __str__(self) -> str:
        return self.message


class GatewayErrorType(Enum):
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_ERROR = "http_error"
    UNKNOWN = "unknown"


@dataclass
class TransientGatewayError(EnsClientError):
    error_type: GatewayErrorType
    message: str
    original_error: Exception | None = None
    status_code: int | None = None
    response_text: str | None = None

    def __str__(self) -> str:
        return self.message


__all__ = [
    "AuthorizationOrStateError",
    "ConfigurationError",
    "EnsClientError",
    "GatewayErrorType",
    "InvalidValueError",
    "MalformedNameError",
    "TransientGatewayError",
]
