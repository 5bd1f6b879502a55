"""Structural interfaces shared across features."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, Sequence

if TYPE_CHECKING:
    from ens_client.contracts import ContractFunction


@dataclass
class TransactionReceipt:
    transaction_hash: str
    status: bool
    block_number: int | None = None
    sender: str | None = None
    to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "transaction_hash": self.transaction_hash,
            "status": self.status,
            "block_number": self.block_number,
            "sender": self.sender,
            "to": self.to,
        }


class LedgerGateway(Protocol):
    def call(
        self,
        contract_address: str,
        function: ContractFunction,
        args: Sequence[Any],
    ) -> Any: ...

    def transact(
        self,
        contract_address: str,
        function: ContractFunction,
        args: Sequence[Any],
        sender: str,
    ) -> TransactionReceipt: ...

    def default_sender(self) -> str: ...
