"""Tests for client configuration."""

from __future__ import annotations

import json

import pytest

from ens_client.config import DEFAULT_RPC_URL, ClientConfig
from ens_client.shared.errors import ConfigurationError
from ens_client.shared.network import RetryConfig

REGISTRY = "0x" + "11" * 20
SENDER = "0x" + "22" * 20

ENV_KEYS = [
    "ENS_CLIENT_RPC_URL",
    "ENS_CLIENT_REGISTRY_ADDRESS",
    "ENS_CLIENT_SENDER",
    "ENS_CLIENT_CONNECT_TIMEOUT",
    "ENS_CLIENT_READ_TIMEOUT",
    "ENS_CLIENT_OPERATION_TIMEOUT",
    "ENS_CLIENT_MAX_RETRIES",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig(registry_address=REGISTRY)
        assert config.rpc_url == DEFAULT_RPC_URL
        assert config.sender is None
        assert config.retry_config.max_retries == 0

    def test_addresses_normalized(self):
        config = ClientConfig(registry_address="0x" + "AA" * 20, sender="0x1")
        assert config.registry_address == "0x" + "aa" * 20
        assert config.sender == "0x" + "0" * 39 + "1"

    def test_invalid_registry_address(self):
        with pytest.raises(ConfigurationError):
            ClientConfig(registry_address="registry")

    def test_negative_retries(self):
        with pytest.raises(ConfigurationError):
            ClientConfig(registry_address=REGISTRY, retry_config=RetryConfig(max_retries=-1))


class TestFromEnvironment:
    def test_requires_registry(self, clean_env):
        with pytest.raises(ConfigurationError):
            ClientConfig.from_environment()

    def test_reads_values(self, clean_env):
        clean_env.setenv("ENS_CLIENT_REGISTRY_ADDRESS", REGISTRY)
        clean_env.setenv("ENS_CLIENT_RPC_URL", "http://node:8545")
        clean_env.setenv("ENS_CLIENT_SENDER", SENDER)
        clean_env.setenv("ENS_CLIENT_READ_TIMEOUT", "20")
        clean_env.setenv("ENS_CLIENT_MAX_RETRIES", "2")

        config = ClientConfig.from_environment()

        assert config.registry_address == REGISTRY
        assert config.rpc_url == "http://node:8545"
        assert config.sender == SENDER
        assert config.timeout_config.read_timeout == 20.0
        assert config.retry_config.max_retries == 2

    def test_invalid_number(self, clean_env):
        clean_env.setenv("ENS_CLIENT_REGISTRY_ADDRESS", REGISTRY)
        clean_env.setenv("ENS_CLIENT_CONNECT_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            ClientConfig.from_environment()


class TestFromFile:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "config.json"
        config = ClientConfig(registry_address=REGISTRY, sender=SENDER, gas=200000)
        config.save(path)

        loaded = ClientConfig.from_file(path)

        assert loaded.to_dict() == config.to_dict()

    def test_missing_registry(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"rpc_url": "http://node"}))
        with pytest.raises(ConfigurationError):
            ClientConfig.from_file(path)

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ClientConfig.from_file(tmp_path / "missing.json")
