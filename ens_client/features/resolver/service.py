"""Resolver business logic: address and content records behind the registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ens_client.contracts import (
    RESOLVER_ADDR,
    RESOLVER_CONTENT,
    RESOLVER_SET_ADDR,
    RESOLVER_SET_CONTENT,
    ContractFunction,
)
from ens_client.features.registry.service import RegistryService
from ens_client.namehash import node_id
from ens_client.shared.errors import AuthorizationOrStateError, TransientGatewayError
from ens_client.shared.logging import get_logger
from ens_client.shared.protocols import TransactionReceipt
from ens_client.validation import ZERO_ADDRESS, require_address, require_bytes32

logger = get_logger(__name__)


@dataclass
class DomainDetails:
    name: str
    node: str
    owner: str
    resolver: str
    address: str | None = None
    content: str | None = None

    @property
    def is_owned(self) -> bool:
        return self.owner != ZERO_ADDRESS

    @property
    def has_resolver(self) -> bool:
        return self.resolver != ZERO_ADDRESS

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "node": self.node,
            "owner": self.owner,
            "resolver": self.resolver,
            "address": self.address,
            "content": self.content,
            "is_owned": self.is_owned,
            "has_resolver": self.has_resolver,
        }


class ResolverService:
    def __init__(self, registry: RegistryService):
        self.registry = registry

    def _resolver_for(self, name: str) -> str:
        resolver = self.registry.get_resolver(name)
        if resolver == ZERO_ADDRESS:
            logger.with_context(name=name).warning("No resolver configured")
            raise AuthorizationOrStateError(message=f"No resolver configured for {name}")
        return resolver

    def _read_record(self, name: str, function: ContractFunction) -> str:
        resolver = self._resolver_for(name)
        node = node_id(name)
        try:
            value = self.registry.gateway.call(resolver, function, [node])
        except (AuthorizationOrStateError, TransientGatewayError) as e:
            logger.with_context(name=name, node=node, resolver=resolver).warning(
                "%s failed: %s", function.name, e
            )
            raise
        logger.with_context(name=name, node=node).debug("%s is %s", function.name, value)
        return value

    def get_addr(self, name: str) -> str:
        return self._read_record(name, RESOLVER_ADDR)

    def set_addr(self, name: str, address: str) -> TransactionReceipt:
        value = require_address(address)
        resolver = self._resolver_for(name)
        node = node_id(name)
        return self.registry.transact(
            resolver,
            RESOLVER_SET_ADDR,
            [node, value],
            {"name": name, "node": node, "address": value},
        )

    def get_content(self, name: str) -> str:
        return self._read_record(name, RESOLVER_CONTENT)

    def set_content(self, name: str, content_hash: str) -> TransactionReceipt:
        value = require_bytes32(content_hash)
        resolver = self._resolver_for(name)
        node = node_id(name)
        return self.registry.transact(
            resolver,
            RESOLVER_SET_CONTENT,
            [node, value],
            {"name": name, "node": node, "content": value},
        )

    def get_domain_details(self, name: str) -> DomainDetails:
        """Snapshot of a name with absent records reported as ``None``.

        Unlike ``get_addr``/``get_content`` this does not fail for unset
        records; transient gateway errors still propagate.
        """
        node = node_id(name)
        details = DomainDetails(
            name=name,
            node=node,
            owner=self.registry.get_owner(name),
            resolver=self.registry.get_resolver(name),
        )
        if not details.has_resolver:
            return details

        gateway = self.registry.gateway
        try:
            details.address = gateway.call(details.resolver, RESOLVER_ADDR, [node])
        except AuthorizationOrStateError:
            details.address = None
        try:
            details.content = gateway.call(details.resolver, RESOLVER_CONTENT, [node])
        except AuthorizationOrStateError:
            details.content = None
        return details
