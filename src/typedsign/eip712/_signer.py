"""Signing of EIP-712 digests with secp256k1."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..errors import InvalidKeyForAddress
from ..primitives import DEFAULT_PRIMITIVES, Primitives
from ._hashing import initialize, sign_hash
from ._model import Signature

logger = logging.getLogger(__name__)


def _key_bytes(private_key: bytes | str) -> bytes:
    if isinstance(private_key, str):
        text = private_key[2:] if private_key[:2] in ("0x", "0X") else private_key
        try:
            key = bytes.fromhex(text)
        except ValueError:
            raise ValueError("private key is not valid hex") from None
    else:
        key = bytes(private_key)
    if len(key) != 32:
        raise ValueError(f"private key must be 32 bytes, got {len(key)}")
    return key


def _normalize_address(address: bytes | str) -> str:
    if isinstance(address, (bytes, bytearray)):
        return "0x" + bytes(address).hex()
    text = address.lower()
    return text if text.startswith("0x") else "0x" + text


def sign(
    digest: bytes,
    private_key: bytes | str,
    expected_address: bytes | str | None = None,
    *,
    primitives: Primitives = DEFAULT_PRIMITIVES,
) -> Signature:
    """
    Sign a 32-byte digest.

    Args:
        digest: Hash to sign, normally sign_hash(typed_data).
        private_key: 32 bytes or hex string (0x optional).
        expected_address: If given, the key must derive this address (case-insensitive).
        primitives: Signing and address-derivation provider.

    Returns:
        Signature with v as int, r and s as 0x-hex.

    Raises:
        InvalidKeyForAddress: key derives a different address; nothing is signed.
        ValueError: malformed digest or key.
    """
    if not isinstance(digest, (bytes, bytearray)):
        raise ValueError(f"digest must be bytes, got {type(digest).__name__}")
    if len(digest) != 32:
        raise ValueError(f"digest must be 32 bytes, got {len(digest)}")
    key = _key_bytes(private_key)
    if expected_address is not None:
        derived = primitives.privkey_to_address(key).lower()
        expected = _normalize_address(expected_address)
        if derived != expected:
            logger.warning(f"Private key derives {derived}, expected {expected}")
            raise InvalidKeyForAddress(derived, expected)
    logger.debug(f"Signing digest: {bytes(digest).hex()[:16]}...")
    r, s, v = primitives.ecsign(key, bytes(digest))
    return Signature.from_scalars(r, s, v)


def prepare_signature(
    typed_data: Any,
    domain: Mapping[str, Any],
    message: Mapping[str, Any],
    private_key: bytes | str,
    expected_address: bytes | str | None = None,
    *,
    primitives: Primitives = DEFAULT_PRIMITIVES,
) -> Signature:
    """Attach domain and message to typed_data and sign its sign hash."""
    td = initialize(typed_data, domain, message)
    digest = sign_hash(td, primitives=primitives)
    return sign(digest, private_key, expected_address, primitives=primitives)


__all__: tuple[str, ...] = ("prepare_signature", "sign")
