"""Tests for name hashing."""

import pytest
from eth_utils import keccak

from ens_client.namehash import (
    ROOT_NODE,
    join_name,
    label_id,
    labelhash,
    namehash,
    node_id,
    parent_name,
    split_name,
)
from ens_client.shared.errors import MalformedNameError

ETH_NODE = "0x93cdeb708b7545dc668eb9280176169d1c33cfd8ed6f04690a0bcc88a93fc4ae"
FOO_ETH_NODE = "0xde9b09fd7c5f901e23a3f19fecc54828e9c848539801e86591bd9801b019f84f"
ETH_LABEL = "0x4f5b812789fc606be1b3b16908db13fc7a9adf7ca72641f84d75b47069d3d7f0"


class TestNamehash:
    def test_empty_name_is_root(self):
        assert namehash("") == b"\x00" * 32
        assert namehash("") == ROOT_NODE
        assert node_id("") == "0x" + "0" * 64

    def test_eth(self):
        assert node_id("eth") == ETH_NODE

    def test_foo_eth(self):
        assert node_id("foo.eth") == FOO_ETH_NODE

    def test_recursive_structure(self):
        expected = keccak(namehash("bar.eth") + keccak(text="1"))
        assert namehash("1.bar.eth") == expected

    def test_is_deterministic(self):
        assert namehash("1.bar.eth") == namehash("1.bar.eth")

    def test_is_32_bytes(self):
        assert len(namehash("a.b.c.d.e")) == 32

    def test_different_names_differ(self):
        assert namehash("foo.eth") != namehash("bar.eth")
        assert namehash("eth.foo") != namehash("foo.eth")

    def test_node_id_is_lower_case_hex(self):
        value = node_id("foo.eth")
        assert value.startswith("0x")
        assert len(value) == 66
        assert value == value.lower()

    def test_unicode_label(self):
        assert namehash("ñ.eth") == keccak(namehash("eth") + keccak("ñ".encode("utf-8")))


class TestLabelhash:
    def test_eth_label(self):
        assert label_id("eth") == ETH_LABEL
        assert labelhash("eth") == keccak(text="eth")

    def test_label_with_dot_is_malformed(self):
        with pytest.raises(MalformedNameError):
            labelhash("foo.eth")

    def test_empty_label_is_malformed(self):
        with pytest.raises(MalformedNameError):
            labelhash("")


class TestMalformedNames:
    @pytest.mark.parametrize(
        "name",
        ["a..b", ".eth", "eth.", ".", "foo bar.eth", "foo\tbar", "Foo.eth", "a\x00.eth"],
    )
    def test_rejected(self, name):
        with pytest.raises(MalformedNameError):
            namehash(name)

    def test_error_carries_name_and_reason(self):
        with pytest.raises(MalformedNameError) as exc_info:
            namehash("a..b")
        assert exc_info.value.name == "a..b"
        assert "empty label" in str(exc_info.value)

    def test_malformed_name_is_value_error(self):
        with pytest.raises(ValueError):
            node_id("a..b")

    def test_overlong_label_rejected(self):
        with pytest.raises(MalformedNameError):
            namehash("x" * 256 + ".eth")


class TestNameHelpers:
    def test_split_name(self):
        assert split_name("1.bar.eth") == ["1", "bar", "eth"]
        assert split_name("") == []

    def test_parent_name(self):
        assert parent_name("1.bar.eth") == "bar.eth"
        assert parent_name("eth") == ""

    def test_join_name(self):
        assert join_name("1", "bar.eth") == "1.bar.eth"
        assert join_name("eth", "") == "eth"
