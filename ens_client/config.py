"""Client configuration loaded from the environment or a JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ens_client.shared.errors import ConfigurationError
from ens_client.shared.network import RetryConfig, TimeoutConfig
from ens_client.validation import AddressValidator

DEFAULT_RPC_URL = "http://localhost:8545"


def _require_address(value: str, field_name: str) -> str:
    result = AddressValidator.validate(value)
    if not result.is_valid:
        raise ConfigurationError(f"{field_name}: {result.error_message}")
    return result.normalized_value


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from e


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from e


@dataclass
class ClientConfig:
    registry_address: str
    rpc_url: str = DEFAULT_RPC_URL
    sender: str | None = None
    timeout_config: TimeoutConfig = field(default_factory=TimeoutConfig)
    retry_config: RetryConfig = field(default_factory=RetryConfig)
    receipt_poll_interval: float = 0.5
    gas: int | None = None

    def __post_init__(self):
        self.registry_address = _require_address(self.registry_address, "registry_address")
        if self.sender:
            self.sender = _require_address(self.sender, "sender")
        if not self.rpc_url:
            raise ConfigurationError("rpc_url is required")
        if self.retry_config.max_retries < 0:
            raise ConfigurationError("max_retries cannot be negative")

    @classmethod
    def from_environment(cls) -> "ClientConfig":
        registry_address = os.getenv("ENS_CLIENT_REGISTRY_ADDRESS", "")
        if not registry_address:
            raise ConfigurationError("ENS_CLIENT_REGISTRY_ADDRESS is not set")

        return cls(
            registry_address=registry_address,
            rpc_url=os.getenv("ENS_CLIENT_RPC_URL", DEFAULT_RPC_URL),
            sender=os.getenv("ENS_CLIENT_SENDER") or None,
            timeout_config=TimeoutConfig(
                connect_timeout=_env_float("ENS_CLIENT_CONNECT_TIMEOUT", 5.0),
                read_timeout=_env_float("ENS_CLIENT_READ_TIMEOUT", 15.0),
                operation_timeout=_env_float("ENS_CLIENT_OPERATION_TIMEOUT", 30.0),
            ),
            retry_config=RetryConfig(
                max_retries=_env_int("ENS_CLIENT_MAX_RETRIES", 0),
            ),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "ClientConfig":
        config_path = Path(path)
        try:
            with open(config_path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e

        if "registry_address" not in data:
            raise ConfigurationError(f"{config_path}: registry_address is required")

        timeout_cfg = data.get("timeout", {})
        retry_cfg = data.get("retry", {})
        return cls(
            registry_address=data["registry_address"],
            rpc_url=data.get("rpc_url", DEFAULT_RPC_URL),
            sender=data.get("sender"),
            timeout_config=TimeoutConfig(
                connect_timeout=timeout_cfg.get("connect_timeout", 5.0),
                read_timeout=timeout_cfg.get("read_timeout", 15.0),
                operation_timeout=timeout_cfg.get("operation_timeout", 30.0),
            ),
            retry_config=RetryConfig(
                max_retries=retry_cfg.get("max_retries", 0),
                base_delay=retry_cfg.get("base_delay", 1.0),
                max_delay=retry_cfg.get("max_delay", 30.0),
            ),
            receipt_poll_interval=data.get("receipt_poll_interval", 0.5),
            gas=data.get("gas"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "registry_address": self.registry_address,
            "rpc_url": self.rpc_url,
            "sender": self.sender,
            "timeout": {
                "connect_timeout": self.timeout_config.connect_timeout,
                "read_timeout": self.timeout_config.read_timeout,
                "operation_timeout": self.timeout_config.operation_timeout,
            },
            "retry": {
                "max_retries": self.retry_config.max_retries,
                "base_delay": self.retry_config.base_delay,
                "max_delay": self.retry_config.max_delay,
            },
            "receipt_poll_interval": self.receipt_poll_interval,
            "gas": self.gas,
        }

    def save(self, path: str | Path) -> None:
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
