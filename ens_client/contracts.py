"""Contract function descriptors for the registry and resolver contracts."""

from __future__ import annotations

from dataclasses import dataclass

from eth_utils import function_signature_to_4byte_selector


@dataclass(frozen=True)
class ContractFunction:
    name: str
    inputs: tuple[str, ...]
    outputs: tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.inputs)})"

    @property
    def selector(self) -> bytes:
        return function_signature_to_4byte_selector(self.signature)

    @property
    def is_read_only(self) -> bool:
        return bool(self.outputs)

    def __str__(self) -> str:
        return self.signature


REGISTRY_OWNER = ContractFunction("owner", ("bytes32",), ("address",))
REGISTRY_RESOLVER = ContractFunction("resolver", ("bytes32",), ("address",))
REGISTRY_SET_OWNER = ContractFunction("setOwner", ("bytes32", "address"))
REGISTRY_SET_RESOLVER = ContractFunction("setResolver", ("bytes32", "address"))
REGISTRY_SET_SUBNODE_OWNER = ContractFunction(
    "setSubnodeOwner", ("bytes32", "bytes32", "address")
)

RESOLVER_ADDR = ContractFunction("addr", ("bytes32",), ("address",))
RESOLVER_SET_ADDR = ContractFunction("setAddr", ("bytes32", "address"))
RESOLVER_CONTENT = ContractFunction("content", ("bytes32",), ("bytes32",))
RESOLVER_SET_CONTENT = ContractFunction("setContent", ("bytes32", "bytes32"))

REGISTRY_FUNCTIONS = (
    REGISTRY_OWNER,
    REGISTRY_RESOLVER,
    REGISTRY_SET_OWNER,
    REGISTRY_SET_RESOLVER,
    REGISTRY_SET_SUBNODE_OWNER,
)

RESOLVER_FUNCTIONS = (
    RESOLVER_ADDR,
    RESOLVER_SET_ADDR,
    RESOLVER_CONTENT,
    RESOLVER_SET_CONTENT,
)
