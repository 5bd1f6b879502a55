"""Unit tests for input validation."""

import pytest

from ens_client.shared.errors import InvalidValueError
from ens_client.validation import (
    ZERO_ADDRESS,
    AddressValidator,
    Bytes32Validator,
    NameValidator,
    require_address,
    require_bytes32,
)


class TestNameValidator:
    def test_valid_name(self):
        result = NameValidator.validate_name("1.bar.eth")
        assert result.is_valid is True
        assert result.normalized_value == ["1", "bar", "eth"]

    def test_root_is_valid(self):
        result = NameValidator.validate_name("")
        assert result.is_valid is True
        assert result.normalized_value == []

    def test_empty_interior_label(self):
        result = NameValidator.validate_name("a..b")
        assert result.is_valid is False
        assert "empty" in result.error_message

    def test_uppercase_rejected(self):
        result = NameValidator.validate_name("FOO.eth")
        assert result.is_valid is False
        assert "lower-case" in result.error_message

    def test_non_string_rejected(self):
        result = NameValidator.validate_name(None)
        assert result.is_valid is False

    def test_label_with_dot(self):
        result = NameValidator.validate_label("a.b")
        assert result.is_valid is False

    def test_hyphen_and_digits_allowed(self):
        assert NameValidator.validate_label("my-name-2").is_valid is True


class TestAddressValidator:
    def test_left_pads_short_address(self):
        result = AddressValidator.validate("0x12345")
        assert result.is_valid is True
        assert result.normalized_value == "0x0000000000000000000000000000000000012345"

    def test_lower_cases(self):
        result = AddressValidator.validate("0x" + "AB" * 20)
        assert result.normalized_value == "0x" + "ab" * 20

    def test_requires_prefix(self):
        result = AddressValidator.validate("12345")
        assert result.is_valid is False

    def test_rejects_non_hex(self):
        result = AddressValidator.validate("0xzz")
        assert result.is_valid is False

    def test_rejects_empty_digits(self):
        assert AddressValidator.validate("0x").is_valid is False

    def test_rejects_too_long(self):
        result = AddressValidator.validate("0x" + "1" * 41)
        assert result.is_valid is False
        assert "40" in result.error_message

    def test_is_zero(self):
        assert AddressValidator.is_zero(ZERO_ADDRESS) is True
        assert AddressValidator.is_zero("0x0") is True
        assert AddressValidator.is_zero("0x1") is False


class TestBytes32Validator:
    def test_valid(self):
        value = "0x736f6d65436f6e74656e74000000000000000000000000000000000000000000"
        result = Bytes32Validator.validate(value)
        assert result.is_valid is True
        assert result.normalized_value == value

    def test_upper_case_normalized(self):
        result = Bytes32Validator.validate("0x" + "AB" * 32)
        assert result.normalized_value == "0x" + "ab" * 32

    def test_short_value_rejected(self):
        result = Bytes32Validator.validate("0x1234")
        assert result.is_valid is False
        assert "64" in result.error_message


class TestRequireHelpers:
    def test_require_address_raises(self):
        with pytest.raises(InvalidValueError):
            require_address("not-an-address")

    def test_require_bytes32_raises(self):
        with pytest.raises(InvalidValueError):
            require_bytes32("0x12")

    def test_require_address_returns_normalized(self):
        assert require_address("0xABC") == "0x" + "0" * 37 + "abc"
