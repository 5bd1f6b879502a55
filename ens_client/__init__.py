"""Client library for a hierarchical, ledger-backed name registry."""

from ens_client.client import EnsClient
from ens_client.config import ClientConfig
from ens_client.features.resolver.service import DomainDetails
from ens_client.gateway import JsonRpcLedgerGateway
from ens_client.memory import InMemoryLedger
from ens_client.namehash import ROOT_NODE, labelhash, namehash, node_id
from ens_client.shared.errors import (
    AuthorizationOrStateError,
    EnsClientError,
    MalformedNameError,
    TransientGatewayError,
)
from ens_client.validation import ZERO_ADDRESS

__all__ = [
    "AuthorizationOrStateError",
    "ClientConfig",
    "DomainDetails",
    "EnsClient",
    "EnsClientError",
    "InMemoryLedger",
    "JsonRpcLedgerGateway",
    "MalformedNameError",
    "ROOT_NODE",
    "TransientGatewayError",
    "ZERO_ADDRESS",
    "labelhash",
    "namehash",
    "node_id",
]
