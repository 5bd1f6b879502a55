"""In-process ledger holding a registry and any number of resolvers.

``InMemoryLedger`` implements the same ``call``/``transact`` interface as
``JsonRpcLedgerGateway`` and applies the contracts' authorization rules, so
it can stand in for a node in tests and offline tooling.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from eth_utils import encode_hex, keccak

from ens_client.contracts import REGISTRY_FUNCTIONS, RESOLVER_FUNCTIONS, ContractFunction
from ens_client.shared.errors import AuthorizationOrStateError
from ens_client.shared.protocols import TransactionReceipt
from ens_client.validation import ZERO_ADDRESS, ZERO_BYTES32, require_address, require_bytes32

logger = logging.getLogger(__name__)

REVERT_MESSAGE = "VM Exception while processing transaction: revert"


def _revert() -> AuthorizationOrStateError:
    return AuthorizationOrStateError(message=REVERT_MESSAGE)


def subnode(node: str, label: str) -> str:
    return encode_hex(keccak(bytes.fromhex(node[2:]) + bytes.fromhex(label[2:])))


def make_account(index: int) -> str:
    return "0x" + keccak(text=f"account-{index}")[-20:].hex()


@dataclass
class RegistryState:
    owners: dict[str, str] = field(default_factory=dict)
    resolvers: dict[str, str] = field(default_factory=dict)

    def owner(self, node: str) -> str:
        return self.owners.get(node, ZERO_ADDRESS)

    def resolver(self, node: str) -> str:
        return self.resolvers.get(node, ZERO_ADDRESS)


@dataclass
class ResolverState:
    addresses: dict[str, str] = field(default_factory=dict)
    contents: dict[str, str] = field(default_factory=dict)


class InMemoryLedger:
    def __init__(
        self,
        registry_address: str | None = None,
        accounts: Sequence[str] | None = None,
        root_owner: str | None = None,
    ):
        self.accounts = [require_address(a) for a in accounts or [make_account(i) for i in range(4)]]
        self.registry_address = require_address(registry_address or make_account(1000))
        self.registry = RegistryState()
        self.registry.owners[ZERO_BYTES32] = require_address(root_owner or self.accounts[0])
        self.resolvers: dict[str, ResolverState] = {}
        self.transactions: list[dict[str, Any]] = []
        self._block_numbers = itertools.count(1)

    def deploy_resolver(self, address: str | None = None) -> str:
        resolver_address = require_address(address or make_account(2000 + len(self.resolvers)))
        self.resolvers.setdefault(resolver_address, ResolverState())
        return resolver_address

    def default_sender(self) -> str:
        return self.accounts[0]

    def call(
        self,
        contract_address: str,
        function: ContractFunction,
        args: Sequence[Any],
    ) -> Any:
        handler = self._handler(contract_address, function, read_only=True)
        return handler(*self._normalize_args(function, args))

    def transact(
        self,
        contract_address: str,
        function: ContractFunction,
        args: Sequence[Any],
        sender: str,
    ) -> TransactionReceipt:
        sender = require_address(sender)
        handler = self._handler(contract_address, function, read_only=False)
        handler(sender, *self._normalize_args(function, args))

        block_number = next(self._block_numbers)
        tx_hash = encode_hex(keccak(text=f"tx-{block_number}-{function.signature}"))
        self.transactions.append(
            {
                "hash": tx_hash,
                "to": require_address(contract_address),
                "function": function.signature,
                "args": list(args),
                "sender": sender,
            }
        )
        logger.debug("Applied %s from %s in block %d", function.signature, sender, block_number)
        return TransactionReceipt(
            transaction_hash=tx_hash,
            status=True,
            block_number=block_number,
            sender=sender,
            to=require_address(contract_address),
        )

    @staticmethod
    def _normalize_args(function: ContractFunction, args: Sequence[Any]) -> list[Any]:
        if len(args) != len(function.inputs):
            raise ValueError(
                f"{function.signature} expects {len(function.inputs)} arguments, got {len(args)}"
            )
        normalized = []
        for abi_type, value in zip(function.inputs, args):
            if abi_type == "address":
                normalized.append(require_address(value))
            elif abi_type == "bytes32":
                normalized.append(require_bytes32(value))
            else:
                normalized.append(value)
        return normalized

    def _handler(
        self, contract_address: str, function: ContractFunction, read_only: bool
    ) -> Callable[..., Any]:
        address = require_address(contract_address)
        if address == self.registry_address:
            prefix, accepted = "_registry_", REGISTRY_FUNCTIONS
        elif address in self.resolvers:
            prefix, accepted = "_resolver_", RESOLVER_FUNCTIONS
        else:
            raise _revert()

        if function not in accepted or function.is_read_only != read_only:
            raise _revert()
        handler = getattr(self, f"{prefix}{function.name}")
        if address in self.resolvers:
            state = self.resolvers[address]
            return lambda *args: handler(state, *args)
        return handler

    def _only_owner(self, sender: str, node: str) -> None:
        if self.registry.owner(node) != sender:
            raise _revert()

    def _registry_owner(self, node: str) -> str:
        return self.registry.owner(node)

    def _registry_resolver(self, node: str) -> str:
        return self.registry.resolver(node)

    def _registry_setOwner(self, sender: str, node: str, owner: str) -> None:
        self._only_owner(sender, node)
        self.registry.owners[node] = owner

    def _registry_setResolver(self, sender: str, node: str, resolver: str) -> None:
        self._only_owner(sender, node)
        self.registry.resolvers[node] = resolver

    def _registry_setSubnodeOwner(
        self, sender: str, node: str, label: str, owner: str
    ) -> None:
        self._only_owner(sender, node)
        self.registry.owners[subnode(node, label)] = owner

    def _resolver_addr(self, state: ResolverState, node: str) -> str:
        address = state.addresses.get(node, ZERO_ADDRESS)
        if address == ZERO_ADDRESS:
            raise _revert()
        return address

    def _resolver_setAddr(self, state: ResolverState, sender: str, node: str, address: str) -> None:
        self._only_owner(sender, node)
        state.addresses[node] = address

    def _resolver_content(self, state: ResolverState, node: str) -> str:
        content = state.contents.get(node, ZERO_BYTES32)
        if content == ZERO_BYTES32:
            raise _revert()
        return content

    def _resolver_setContent(self, state: ResolverState, sender: str, node: str, content: str) -> None:
        self._only_owner(sender, node)
        state.contents[node] = content
