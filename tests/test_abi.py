"""Fixed-width ABI word encoding."""

from __future__ import annotations

import pytest

from typedsign.abi import encode_abi, encode_single, is_atomic_type
from typedsign.errors import AbiEncodingError

ADDRESS = "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"


def test_uint256_big_endian() -> None:
    assert encode_single("uint256", 1) == bytes(31) + b"\x01"
    assert encode_single("uint8", 255) == bytes(31) + b"\xff"


def test_uint_accepts_numeric_strings() -> None:
    assert encode_single("uint256", "0x10") == encode_single("uint256", 16)
    assert encode_single("uint", "16") == encode_single("uint256", 16)


def test_int_twos_complement() -> None:
    assert encode_single("int256", -1) == b"\xff" * 32
    assert encode_single("int8", -128) == b"\xff" * 31 + b"\x80"


def test_address_right_aligned() -> None:
    word = encode_single("address", ADDRESS)
    assert word == bytes(12) + bytes.fromhex(ADDRESS[2:])
    assert encode_single("address", bytes.fromhex(ADDRESS[2:])) == word
    assert encode_single("address", int(ADDRESS, 16)) == word


def test_bool_words() -> None:
    assert encode_single("bool", True) == bytes(31) + b"\x01"
    assert encode_single("bool", False) == bytes(32)


def test_fixed_bytes_left_aligned() -> None:
    assert encode_single("bytes4", b"\xde\xad\xbe\xef") == b"\xde\xad\xbe\xef" + bytes(28)
    assert encode_single("bytes32", "0x" + "ab" * 32) == b"\xab" * 32


@pytest.mark.parametrize(
    ("tag", "value"),
    [
        ("uint8", 256),
        ("uint256", -1),
        ("int8", 128),
        ("uint256", True),
        ("uint256", "twelve"),
        ("uint256", 1.5),
        ("address", "0x1234"),
        ("address", "CD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826"),
        ("bool", 2),
        ("bool", "true"),
        ("bytes4", b"\x00" * 5),
        ("bytes32", "0xzz"),
    ],
)
def test_rejects_malformed_values(tag: str, value: object) -> None:
    with pytest.raises(AbiEncodingError):
        encode_single(tag, value)


@pytest.mark.parametrize("tag", ["uint7", "uint264", "int0", "bytes0", "bytes33", "uint08", "string", "bytes", "Person", "uint256[]"])
def test_non_atomic_tags(tag: str) -> None:
    assert not is_atomic_type(tag)
    with pytest.raises(AbiEncodingError):
        encode_single(tag, 0)


@pytest.mark.parametrize("tag", ["uint", "int", "uint8", "int256", "address", "bool", "bytes1", "bytes32"])
def test_atomic_tags(tag: str) -> None:
    assert is_atomic_type(tag)


def test_encode_abi_concatenates_words() -> None:
    out = encode_abi([("uint256", 1), ("bool", True), ("address", ADDRESS)])
    assert len(out) == 96
    assert out[:32] == encode_single("uint256", 1)
    assert out[64:] == encode_single("address", ADDRESS)


def test_encode_abi_reports_position() -> None:
    with pytest.raises(AbiEncodingError) as excinfo:
        encode_abi([("uint256", 1), ("uint8", 1000)])
    assert excinfo.value.position == 1
    assert excinfo.value.type_tag == "uint8"
