"""Keccak-256 and secp256k1 primitives against published vectors."""

from __future__ import annotations

import hashlib

import pytest

from typedsign import (
    keccak256,
    keccak_from_string,
    privkey_to_address,
    privkey_to_pubkey,
    sign_recoverable,
)

KECCAK256_EMPTY = bytes.fromhex(
    "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
)
KECCAK256_ABC = bytes.fromhex(
    "4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"
)
KECCAK256_FOX = bytes.fromhex(
    "4d741b6f1eb29cb2a9b9911c82f56fa8d73b04959d3d9d222895df6c0b28aa15"
)
EIP712_DOMAIN_TYPEHASH = bytes.fromhex(
    "8b73c3c69bb8fe3d512ecc4cf759cc79239f7b179b0ffacaa9a75d522b39400f"
)

PRIV_ONE = bytes(31) + bytes([1])
G_UNCOMPRESSED = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
PRIV_ONE_ADDRESS = "0x7e5f4552091a69125d5dfcb7b8c2659029395bdf"

# RFC 6979 vector: key 1, sha256("Satoshi Nakamoto"), low-s form.
SATOSHI_R = 0x934B1EA10A4B3C1757E2B0C017D0B6143CE3C9A7E6A4A49860D7A6AB210EE3D8
SATOSHI_S = 0x2442CE9D2B916064108014783E923EC36B49743E2FFA1C4496F01A512AAFD9E5

SECP_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def test_keccak256_empty() -> None:
    assert keccak256(b"") == KECCAK256_EMPTY


def test_keccak256_known_strings() -> None:
    assert keccak256(b"abc") == KECCAK256_ABC
    assert keccak256(b"The quick brown fox jumps over the lazy dog") == KECCAK256_FOX


def test_keccak256_is_not_sha3() -> None:
    assert keccak256(b"") != hashlib.sha3_256(b"").digest()


def test_keccak_from_string() -> None:
    text = "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
    assert keccak_from_string(text, 256) == EIP712_DOMAIN_TYPEHASH
    assert keccak_from_string("abc") == KECCAK256_ABC


def test_keccak_from_string_rejects_other_widths() -> None:
    with pytest.raises(ValueError):
        keccak_from_string("abc", 512)


@pytest.mark.parametrize("length", [134, 135, 136, 137, 271, 272, 273])
def test_keccak256_rate_boundaries(length: int) -> None:
    data = bytes(range(256)) * 2
    digest = keccak256(data[:length])
    assert len(digest) == 32
    assert digest != keccak256(data[: length - 1])
    assert digest == keccak256(bytearray(data[:length]))


def test_privkey_to_pubkey() -> None:
    assert privkey_to_pubkey(PRIV_ONE) == G_UNCOMPRESSED


def test_privkey_to_address() -> None:
    assert privkey_to_address(PRIV_ONE) == PRIV_ONE_ADDRESS


def test_cow_address(cow_key: bytes) -> None:
    assert privkey_to_address(cow_key) == "0xcd2a3d9f938e13cd947ec05abc7fe734df8dd826"


@pytest.mark.parametrize("bad", [b"", bytes(32), bytes(31) + b"\x01" + b"\x00", SECP_N.to_bytes(32, "big")])
def test_privkey_rejects_invalid(bad: bytes) -> None:
    with pytest.raises(ValueError):
        privkey_to_pubkey(bad)


def test_sign_recoverable_rfc6979_vector() -> None:
    msg_hash = hashlib.sha256(b"Satoshi Nakamoto").digest()
    r, s, v = sign_recoverable(PRIV_ONE, msg_hash)
    assert r == SATOSHI_R
    assert s == SATOSHI_S
    assert v in (27, 28)


def test_sign_recoverable_low_s_and_deterministic() -> None:
    msg_hash = keccak256(b"message to sign")
    first = sign_recoverable(PRIV_ONE, msg_hash)
    assert first == sign_recoverable(PRIV_ONE, msg_hash)
    assert first[1] <= SECP_N // 2


def test_sign_recoverable_rejects_short_hash() -> None:
    with pytest.raises(ValueError):
        sign_recoverable(PRIV_ONE, b"\x00" * 31)
