"""Ledger gateway backed by an Ethereum JSON-RPC node."""

from __future__ import annotations

import time
from typing import Any, Sequence

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_utils import decode_hex, encode_hex

from ens_client.contracts import ContractFunction
from ens_client.shared.errors import (
    AuthorizationOrStateError,
    ConfigurationError,
    GatewayErrorType,
    TransientGatewayError,
)
from ens_client.shared.logging import get_logger
from ens_client.shared.network import JsonRpcClient
from ens_client.shared.protocols import TransactionReceipt
from ens_client.validation import require_address, require_bytes32

logger = get_logger(__name__)


def encode_arguments(function: ContractFunction, args: Sequence[Any]) -> bytes:
    if len(args) != len(function.inputs):
        raise ValueError(
            f"{function.signature} expects {len(function.inputs)} arguments, got {len(args)}"
        )

    values: list[Any] = []
    for abi_type, value in zip(function.inputs, args):
        if abi_type == "bytes32":
            values.append(decode_hex(require_bytes32(value)))
        elif abi_type == "address":
            values.append(decode_hex(require_address(value)))
        else:
            values.append(value)
    return encode(list(function.inputs), values)


def encode_call_data(function: ContractFunction, args: Sequence[Any]) -> str:
    return encode_hex(function.selector + encode_arguments(function, args))


def _to_wire(abi_type: str, value: Any) -> Any:
    if abi_type == "address":
        return value.lower()
    if abi_type == "bytes32":
        return encode_hex(value)
    return value


def decode_result(function: ContractFunction, raw: bytes) -> Any:
    decoded = decode(list(function.outputs), raw)
    values = tuple(
        _to_wire(abi_type, value) for abi_type, value in zip(function.outputs, decoded)
    )
    if len(values) == 1:
        return values[0]
    return values


class JsonRpcLedgerGateway:
    DEFAULT_POLL_INTERVAL = 0.5

    def __init__(
        self,
        rpc_client: JsonRpcClient,
        gas: int | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self.rpc_client = rpc_client
        self.gas = gas
        self.poll_interval = poll_interval

    def call(
        self,
        contract_address: str,
        function: ContractFunction,
        args: Sequence[Any],
    ) -> Any:
        to = require_address(contract_address)
        result = self.rpc_client.request(
            "eth_call",
            [{"to": to, "data": encode_call_data(function, args)}, "latest"],
            context=f"Call {function.signature}",
        )
        raw = decode_hex(result or "0x")
        if not raw:
            raise AuthorizationOrStateError(
                message=f"execution reverted: empty return data from {to} for {function.signature}"
            )
        try:
            return decode_result(function, raw)
        except DecodingError as e:
            raise AuthorizationOrStateError(
                message=f"execution reverted: undecodable return data from {to} for {function.signature}"
            ) from e

    def transact(
        self,
        contract_address: str,
        function: ContractFunction,
        args: Sequence[Any],
        sender: str,
    ) -> TransactionReceipt:
        to = require_address(contract_address)
        transaction: dict[str, Any] = {
            "from": require_address(sender),
            "to": to,
            "data": encode_call_data(function, args),
        }
        if self.gas is not None:
            transaction["gas"] = hex(self.gas)

        tx_hash = self.rpc_client.request(
            "eth_sendTransaction",
            [transaction],
            context=f"Send {function.signature}",
            retryable=False,
        )
        logger.with_context(transaction_hash=tx_hash, function=function.signature).debug(
            "Transaction submitted"
        )

        receipt = self.wait_for_receipt(tx_hash)
        if not receipt.status:
            raise AuthorizationOrStateError(
                message=f"Transaction {tx_hash} reverted",
                transaction_hash=tx_hash,
            )
        return receipt

    def wait_for_receipt(self, tx_hash: str) -> TransactionReceipt:
        deadline = time.monotonic() + self.rpc_client.timeout_config.operation_timeout
        while True:
            raw = self.rpc_client.request(
                "eth_getTransactionReceipt",
                [tx_hash],
                context="Fetch transaction receipt",
            )
            if raw is not None:
                return self._parse_receipt(tx_hash, raw)
            if time.monotonic() >= deadline:
                raise TransientGatewayError(
                    error_type=GatewayErrorType.TIMEOUT,
                    message=f"Timed out waiting for receipt of transaction {tx_hash}",
                )
            time.sleep(self.poll_interval)

    @staticmethod
    def _parse_receipt(tx_hash: str, raw: dict[str, Any]) -> TransactionReceipt:
        status = raw.get("status")
        block_number = raw.get("blockNumber")
        return TransactionReceipt(
            transaction_hash=raw.get("transactionHash", tx_hash),
            # pre-Byzantium nodes omit status
            status=True if status is None else int(status, 16) == 1,
            block_number=int(block_number, 16) if block_number else None,
            sender=raw.get("from"),
            to=raw.get("to"),
        )

    def accounts(self) -> list[str]:
        result = self.rpc_client.request("eth_accounts", context="List accounts")
        return [account.lower() for account in result or []]

    def default_sender(self) -> str:
        accounts = self.accounts()
        if not accounts:
            raise ConfigurationError(
                "The node manages no accounts; configure a sender address"
            )
        return accounts[0]
