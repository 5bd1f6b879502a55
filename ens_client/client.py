"""Facade composing the registry, resolver and subdomain services."""

from __future__ import annotations

from ens_client.config import ClientConfig
from ens_client.features.registry.service import RegistryService
from ens_client.features.resolver.service import DomainDetails, ResolverService
from ens_client.features.subdomain.service import SubdomainService
from ens_client.gateway import JsonRpcLedgerGateway
from ens_client.shared.network import JsonRpcClient
from ens_client.shared.protocols import LedgerGateway, TransactionReceipt


class EnsClient:
    def __init__(
        self,
        gateway: LedgerGateway,
        registry_address: str,
        sender: str | None = None,
    ):
        self.gateway = gateway
        self.registry = RegistryService(gateway, registry_address, sender)
        self.resolver = ResolverService(self.registry)
        self.subdomains = SubdomainService(self.registry)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "EnsClient":
        rpc_client = JsonRpcClient(
            config.rpc_url,
            timeout_config=config.timeout_config,
            retry_config=config.retry_config,
        )
        gateway = JsonRpcLedgerGateway(
            rpc_client, gas=config.gas, poll_interval=config.receipt_poll_interval
        )
        return cls(gateway, config.registry_address, config.sender)

    @property
    def sender(self) -> str:
        return self.registry.sender

    def get_owner(self, name: str) -> str:
        return self.registry.get_owner(name)

    def get_resolver(self, name: str) -> str:
        return self.registry.get_resolver(name)

    def set_resolver(self, name: str, resolver_address: str) -> TransactionReceipt:
        return self.registry.set_resolver(name, resolver_address)

    def set_owner(self, name: str, new_owner: str) -> TransactionReceipt:
        return self.registry.set_owner(name, new_owner)

    def get_addr(self, name: str) -> str:
        return self.resolver.get_addr(name)

    def set_addr(self, name: str, address: str) -> TransactionReceipt:
        return self.resolver.set_addr(name, address)

    def get_content(self, name: str) -> str:
        return self.resolver.get_content(name)

    def set_content(self, name: str, content_hash: str) -> TransactionReceipt:
        return self.resolver.set_content(name, content_hash)

    def get_domain_details(self, name: str) -> DomainDetails:
        return self.resolver.get_domain_details(name)

    def create_subdomain(
        self, label: str, parent_name: str, owner: str | None = None
    ) -> TransactionReceipt:
        return self.subdomains.create_subdomain(label, parent_name, owner)

    def transfer_subdomain(
        self, label: str, parent_name: str, new_owner: str
    ) -> TransactionReceipt:
        return self.subdomains.transfer_subdomain(label, parent_name, new_owner)

    def delete_subdomain(
        self, label: str, parent_name: str, clear_resolver: bool = False
    ) -> TransactionReceipt:
        return self.subdomains.delete_subdomain(label, parent_name, clear_resolver)
