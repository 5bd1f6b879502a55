"""Subdomain lifecycle: create, transfer and delete children of an owned name."""

from __future__ import annotations

from ens_client.features.registry.service import RegistryService
from ens_client.namehash import join_name, label_id, node_id, split_name, validate_label
from ens_client.shared.errors import AuthorizationOrStateError, TransientGatewayError
from ens_client.shared.logging import get_logger
from ens_client.shared.protocols import TransactionReceipt
from ens_client.validation import ZERO_ADDRESS, require_address

logger = get_logger(__name__)


class SubdomainService:
    def __init__(self, registry: RegistryService):
        self.registry = registry

    @staticmethod
    def subdomain_name(label: str, parent_name: str) -> str:
        validate_label(label)
        split_name(parent_name)
        return join_name(label, parent_name)

    def _assign(self, label: str, parent_name: str, owner: str) -> TransactionReceipt:
        name = self.subdomain_name(label, parent_name)
        return self.registry.set_subnode_owner(
            node_id(parent_name), label_id(label), owner, name
        )

    def create_subdomain(
        self, label: str, parent_name: str, owner: str | None = None
    ) -> TransactionReceipt:
        new_owner = require_address(owner) if owner else self.registry.sender
        receipt = self._assign(label, parent_name, new_owner)
        logger.with_context(label=label, parent=parent_name, owner=new_owner).info(
            "Created subdomain"
        )
        return receipt

    def transfer_subdomain(
        self, label: str, parent_name: str, new_owner: str
    ) -> TransactionReceipt:
        owner = require_address(new_owner)
        receipt = self._assign(label, parent_name, owner)
        logger.with_context(label=label, parent=parent_name, owner=owner).info(
            "Transferred subdomain"
        )
        return receipt

    def delete_subdomain(
        self, label: str, parent_name: str, clear_resolver: bool = False
    ) -> TransactionReceipt:
        """Reset the child's owner to the zero address.

        The registry keeps the child's resolver pointer unless
        ``clear_resolver`` is set, in which case the child is first reclaimed
        by the sender so its resolver can be zeroed before the owner reset.
        If zeroing the resolver fails, ownership is handed back to the
        previous owner before the error is re-raised.
        """
        name = self.subdomain_name(label, parent_name)
        if clear_resolver:
            self._clear_resolver(label, parent_name, name)

        receipt = self._assign(label, parent_name, ZERO_ADDRESS)
        logger.with_context(
            label=label, parent=parent_name, cleared_resolver=clear_resolver
        ).info("Deleted subdomain")
        return receipt

    def _clear_resolver(self, label: str, parent_name: str, name: str) -> None:
        previous_owner = self.registry.get_owner(name)
        self._assign(label, parent_name, self.registry.sender)
        try:
            self.registry.set_resolver(name, ZERO_ADDRESS)
        except (AuthorizationOrStateError, TransientGatewayError):
            logger.with_context(name=name, owner=previous_owner).warning(
                "Resolver reset failed, restoring previous owner"
            )
            self._assign(label, parent_name, previous_owner)
            raise
