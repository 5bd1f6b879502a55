"""Shared utilities for ens-client."""

from ens_client.shared.errors import (
    AuthorizationOrStateError,
    ConfigurationError,
    EnsClientError,
    GatewayErrorType,
    InvalidValueError,
    MalformedNameError,
    TransientGatewayError,
)
from ens_client.shared.logging import (
    ContextAdapter,
    LoggingConfig,
    LogLevel,
    format_error_for_user,
    get_logger,
    setup_logging,
)
from ens_client.shared.network import (
    JsonRpcClient,
    RetryConfig,
    RpcError,
    TimeoutConfig,
)
from ens_client.shared.protocols import LedgerGateway, TransactionReceipt

__all__ = [
    "AuthorizationOrStateError",
    "ConfigurationError",
    "EnsClientError",
    "GatewayErrorType",
    "InvalidValueError",
    "MalformedNameError",
    "TransientGatewayError",
    "JsonRpcClient",
    "RetryConfig",
    "RpcError",
    "TimeoutConfig",
    "LedgerGateway",
    "TransactionReceipt",
    "ContextAdapter",
    "LoggingConfig",
    "LogLevel",
    "format_error_for_user",
    "get_logger",
    "setup_logging",
]
