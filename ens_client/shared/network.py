"""JSON-RPC transport with timeout handling and opt-in retry for reads."""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

import requests
from requests.exceptions import ConnectionError, HTTPError, Timeout

from ens_client.shared.errors import (
    AuthorizationOrStateError,
    GatewayErrorType,
    TransientGatewayError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class TimeoutConfig:
    connect_timeout: float = 5.0
    read_timeout: float = 15.0
    operation_timeout: float = 30.0

    @property
    def request_timeout(self) -> tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)


@dataclass
class RetryConfig:
    max_retries: int = 0
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    retryable_status_codes: set[int] = field(
        default_factory=lambda: {408, 429, 500, 502, 503, 504}
    )

    def calculate_delay(self, attempt: int) -> float:
        delay = self.base_delay * (self.exponential_base**attempt)
        return min(delay, self.max_delay)


DEFAULT_TIMEOUT_CONFIG = TimeoutConfig()
DEFAULT_RETRY_CONFIG = RetryConfig()


@dataclass
class RpcError(Exception):
    """An error object returned inside a JSON-RPC response.

    The node answered, so the ledger itself rejected the request.
    """

    code: int
    message: str
    data: Any = None

    def __str__(self) -> str:
        return self.message

    def to_ledger_error(self) -> AuthorizationOrStateError:
        return AuthorizationOrStateError(
            message=self.message,
            data=self.data if isinstance(self.data, str) else None,
        )


def classify_error(error: Exception) -> GatewayErrorType:
    if isinstance(error, Timeout):
        return GatewayErrorType.TIMEOUT
    elif isinstance(error, ConnectionError):
        return GatewayErrorType.CONNECTION_ERROR
    elif isinstance(error, HTTPError):
        return GatewayErrorType.HTTP_ERROR
    return GatewayErrorType.UNKNOWN


def create_gateway_error(
    error: Exception, rpc_url: str, context: str = ""
) -> TransientGatewayError:
    error_type = classify_error(error)
    context_prefix = f"{context}: " if context else ""

    if error_type == GatewayErrorType.TIMEOUT:
        message = (
            f"{context_prefix}Connection timeout. Node may be unavailable: {rpc_url}"
        )
    elif error_type == GatewayErrorType.CONNECTION_ERROR:
        message = (
            f"{context_prefix}Cannot connect to node: {rpc_url}. "
            "Check your network connection."
        )
    elif error_type == GatewayErrorType.HTTP_ERROR:
        status_code = getattr(error.response, "status_code", None)
        response_text = getattr(error.response, "text", None)
        message = f"{context_prefix}HTTP error {status_code}: {response_text or 'Unknown error'}"
        return TransientGatewayError(
            error_type=error_type,
            message=message,
            original_error=error,
            status_code=status_code,
            response_text=response_text,
        )
    else:
        message = f"{context_prefix}Network error: {str(error)}"

    return TransientGatewayError(
        error_type=error_type,
        message=message,
        original_error=error,
    )


def should_retry(error: Exception, retry_config: RetryConfig) -> bool:
    if isinstance(error, Timeout):
        return True
    if isinstance(error, ConnectionError):
        return True
    if isinstance(error, HTTPError):
        status_code = getattr(error.response, "status_code", None)
        if status_code and status_code in retry_config.retryable_status_codes:
            return True
    return False


class JsonRpcClient:
    def __init__(
        self,
        rpc_url: str,
        timeout_config: TimeoutConfig | None = None,
        retry_config: RetryConfig | None = None,
        on_retry: Callable[[int, Exception, float], None] | None = None,
    ):
        self.rpc_url = rpc_url.rstrip("/")
        self.timeout_config = timeout_config or DEFAULT_TIMEOUT_CONFIG
        self.retry_config = retry_config or DEFAULT_RETRY_CONFIG
        self.on_retry = on_retry
        self._ids = itertools.count(1)

    def _execute_with_retry(
        self,
        operation: Callable[[], T],
        context: str = "",
        retryable: bool = True,
    ) -> T:
        last_error: Exception | None = None
        max_retries = self.retry_config.max_retries if retryable else 0

        for attempt in range(max_retries + 1):
            try:
                return operation()
            except RpcError as e:
                raise e.to_ledger_error() from e
            except Exception as e:
                last_error = e

                if attempt < max_retries and should_retry(e, self.retry_config):
                    delay = self.retry_config.calculate_delay(attempt)
                    logger.warning(
                        "RPC request failed (attempt %d/%d), retrying in %.1fs: %s",
                        attempt + 1,
                        max_retries + 1,
                        delay,
                        str(e),
                    )

                    if self.on_retry:
                        self.on_retry(attempt + 1, e, delay)

                    time.sleep(delay)
                else:
                    break

        raise create_gateway_error(
            last_error or Exception("Unknown error"), self.rpc_url, context
        )

    def request(
        self,
        method: str,
        params: list[Any] | None = None,
        context: str = "",
        retryable: bool = True,
    ) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }
        timeout = self.timeout_config.request_timeout

        def operation() -> Any:
            response = requests.post(self.rpc_url, json=payload, timeout=timeout)
            response.raise_for_status()
            body = response.json()
            error = body.get("error")
            if error:
                raise RpcError(
                    code=error.get("code", 0),
                    message=error.get("message", "Unknown RPC error"),
                    data=error.get("data"),
                )
            return body.get("result")

        logger.debug("RPC %s %s", method, context)
        return self._execute_with_retry(operation, context or method, retryable)
