"""Name hashing for the registry tree.

A name is hashed right-to-left: the root is 32 zero bytes, and each label
extends its parent's node as ``keccak256(parent_node + keccak256(label))``.
A node can therefore only be addressed by someone who knows every label on
the path from the root.
"""

from __future__ import annotations

from eth_utils import encode_hex, keccak

from ens_client.shared.errors import MalformedNameError
from ens_client.validation import NameValidator

ROOT_NODE = b"\x00" * 32


def split_name(name: str) -> list[str]:
    result = NameValidator.validate_name(name)
    if not result.is_valid:
        raise MalformedNameError(name, result.error_message or "invalid name")
    return result.normalized_value


def validate_label(label: str) -> str:
    result = NameValidator.validate_label(label)
    if not result.is_valid:
        raise MalformedNameError(label, result.error_message or "invalid label")
    return result.normalized_value


def join_name(label: str, parent_name: str) -> str:
    if parent_name == "":
        return label
    return f"{label}.{parent_name}"


def parent_name(name: str) -> str:
    labels = split_name(name)
    return ".".join(labels[1:])


def labelhash(label: str) -> bytes:
    return keccak(text=validate_label(label))


def namehash(name: str) -> bytes:
    node = ROOT_NODE
    for label in reversed(split_name(name)):
        node = keccak(node + keccak(text=label))
    return node


def node_id(name: str) -> str:
    return encode_hex(namehash(name))


def label_id(label: str) -> str:
    return encode_hex(labelhash(label))
