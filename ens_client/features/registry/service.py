"""Registry business logic: node ownership and resolver pointers."""

from __future__ import annotations

from typing import Any

from ens_client.contracts import (
    REGISTRY_OWNER,
    REGISTRY_RESOLVER,
    REGISTRY_SET_OWNER,
    REGISTRY_SET_RESOLVER,
    REGISTRY_SET_SUBNODE_OWNER,
    ContractFunction,
)
from ens_client.namehash import node_id
from ens_client.shared.errors import AuthorizationOrStateError, TransientGatewayError
from ens_client.shared.logging import get_logger
from ens_client.shared.protocols import LedgerGateway, TransactionReceipt
from ens_client.validation import ZERO_ADDRESS, require_address

logger = get_logger(__name__)


class RegistryService:
    def __init__(
        self,
        gateway: LedgerGateway,
        registry_address: str,
        sender: str | None = None,
    ):
        self.gateway = gateway
        self.registry_address = require_address(registry_address)
        self._sender = require_address(sender) if sender else None

    @property
    def sender(self) -> str:
        if self._sender is None:
            self._sender = require_address(self.gateway.default_sender())
        return self._sender

    def call(self, function: ContractFunction, args: list[Any]) -> Any:
        return self.gateway.call(self.registry_address, function, args)

    def transact(
        self,
        contract_address: str,
        function: ContractFunction,
        args: list[Any],
        context: dict[str, Any],
    ) -> TransactionReceipt:
        """Send a state-changing call from the configured sender.

        Failures are logged and re-raised unchanged; state-changing calls are
        never retried here.
        """
        log = logger.with_context(function=function.signature, sender=self.sender, **context)
        try:
            receipt = self.gateway.transact(contract_address, function, args, self.sender)
        except (AuthorizationOrStateError, TransientGatewayError) as e:
            log.warning("Transaction failed: %s", e)
            raise
        log.info("Transaction applied: %s", receipt.transaction_hash)
        return receipt

    def get_owner(self, name: str) -> str:
        node = node_id(name)
        owner = self.call(REGISTRY_OWNER, [node])
        logger.with_context(name=name, node=node).debug("Owner is %s", owner)
        return owner

    def get_resolver(self, name: str) -> str:
        node = node_id(name)
        resolver = self.call(REGISTRY_RESOLVER, [node])
        logger.with_context(name=name, node=node).debug("Resolver is %s", resolver)
        return resolver

    def is_owned(self, name: str) -> bool:
        return self.get_owner(name) != ZERO_ADDRESS

    def set_resolver(self, name: str, resolver_address: str) -> TransactionReceipt:
        node = node_id(name)
        resolver = require_address(resolver_address)
        return self.transact(
            self.registry_address,
            REGISTRY_SET_RESOLVER,
            [node, resolver],
            {"name": name, "node": node, "resolver": resolver},
        )

    def set_owner(self, name: str, new_owner: str) -> TransactionReceipt:
        node = node_id(name)
        owner = require_address(new_owner)
        return self.transact(
            self.registry_address,
            REGISTRY_SET_OWNER,
            [node, owner],
            {"name": name, "node": node, "owner": owner},
        )

    def set_subnode_owner(
        self, parent_node: str, label_hash: str, owner: str, name: str
    ) -> TransactionReceipt:
        return self.transact(
            self.registry_address,
            REGISTRY_SET_SUBNODE_OWNER,
            [parent_node, label_hash, require_address(owner)],
            {"name": name, "parent_node": parent_node, "owner": owner},
        )
