"""Input validation for names, addresses and 32-byte values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ens_client.shared.errors import InvalidValueError

ZERO_ADDRESS = "0x" + "0" * 40
ZERO_BYTES32 = "0x" + "0" * 64

HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")
FORBIDDEN_LABEL_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")
UPPERCASE_ASCII = re.compile(r"[A-Z]")
MAX_LABEL_BYTES = 255


@dataclass
class ValidationResult:
    is_valid: bool
    error_message: str | None = None
    normalized_value: Any = None


class NameValidator:
    @classmethod
    def validate_label(cls, label: str) -> ValidationResult:
        if not isinstance(label, str):
            return ValidationResult(
                is_valid=False, error_message="Label must be a string"
            )

        if not label:
            return ValidationResult(is_valid=False, error_message="empty label")

        if "." in label:
            return ValidationResult(
                is_valid=False,
                error_message="label must not contain '.'",
            )

        if FORBIDDEN_LABEL_CHARS.search(label):
            return ValidationResult(
                is_valid=False,
                error_message="label contains whitespace or control characters",
            )

        if UPPERCASE_ASCII.search(label):
            return ValidationResult(
                is_valid=False,
                error_message="label must be lower-case",
            )

        if len(label.encode("utf-8")) > MAX_LABEL_BYTES:
            return ValidationResult(
                is_valid=False,
                error_message=f"label exceeds {MAX_LABEL_BYTES} bytes",
            )

        return ValidationResult(is_valid=True, normalized_value=label)

    @classmethod
    def validate_name(cls, name: str) -> ValidationResult:
        """Validate a dotted name. The empty string is the root and is valid."""
        if not isinstance(name, str):
            return ValidationResult(
                is_valid=False, error_message="Name must be a string"
            )

        if name == "":
            return ValidationResult(is_valid=True, normalized_value=[])

        labels = name.split(".")
        for label in labels:
            result = cls.validate_label(label)
            if not result.is_valid:
                return result

        return ValidationResult(is_valid=True, normalized_value=labels)


def _strip_hex_prefix(value: str) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    if not stripped.lower().startswith("0x"):
        return None
    return stripped[2:]


class AddressValidator:
    HEX_DIGITS = 40

    @classmethod
    def validate(cls, value: str) -> ValidationResult:
        digits = _strip_hex_prefix(value)
        if digits is None:
            return ValidationResult(
                is_valid=False,
                error_message="Invalid address: expected a 0x-prefixed hex string",
            )

        if not digits or not HEX_PATTERN.match(digits):
            return ValidationResult(
                is_valid=False,
                error_message="Invalid address: not a hex value",
            )

        if len(digits) > cls.HEX_DIGITS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid address: longer than {cls.HEX_DIGITS} hex digits",
            )

        normalized = "0x" + digits.lower().rjust(cls.HEX_DIGITS, "0")
        return ValidationResult(is_valid=True, normalized_value=normalized)

    @staticmethod
    def is_zero(value: str) -> bool:
        result = AddressValidator.validate(value)
        return result.is_valid and result.normalized_value == ZERO_ADDRESS


class Bytes32Validator:
    HEX_DIGITS = 64

    @classmethod
    def validate(cls, value: str) -> ValidationResult:
        digits = _strip_hex_prefix(value)
        if digits is None:
            return ValidationResult(
                is_valid=False,
                error_message="Invalid bytes32: expected a 0x-prefixed hex string",
            )

        if not HEX_PATTERN.match(digits):
            return ValidationResult(
                is_valid=False,
                error_message="Invalid bytes32: not a hex value",
            )

        if len(digits) != cls.HEX_DIGITS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid bytes32: expected exactly {cls.HEX_DIGITS} hex digits",
            )

        return ValidationResult(is_valid=True, normalized_value="0x" + digits.lower())


def require_address(value: str) -> str:
    result = AddressValidator.validate(value)
    if not result.is_valid:
        raise InvalidValueError(f"{result.error_message}: {value!r}")
    return result.normalized_value


def require_bytes32(value: str) -> str:
    result = Bytes32Validator.validate(value)
    if not result.is_valid:
        raise InvalidValueError(f"{result.error_message}: {value!r}")
    return result.normalized_value
