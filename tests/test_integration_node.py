"""Read-only checks against a live node hosting a registry.

Skipped unless ENS_CLIENT_RPC_URL and ENS_CLIENT_REGISTRY_ADDRESS are set.
"""

import os

import pytest

from ens_client.client import EnsClient
from ens_client.config import ClientConfig
from ens_client.validation import ZERO_ADDRESS

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (os.getenv("ENS_CLIENT_RPC_URL") and os.getenv("ENS_CLIENT_REGISTRY_ADDRESS")),
        reason="No live node configured",
    ),
]


@pytest.fixture
def live_client():
    return EnsClient.from_config(ClientConfig.from_environment())


def test_root_is_owned(live_client):
    assert live_client.get_owner("") != ZERO_ADDRESS


def test_unregistered_name_has_no_owner(live_client):
    assert live_client.get_owner("this-name-is-never-registered-0b5c.eth") == ZERO_ADDRESS


def test_unregistered_name_has_no_resolver(live_client):
    assert live_client.get_resolver("this-name-is-never-registered-0b5c.eth") == ZERO_ADDRESS
