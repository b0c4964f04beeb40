"""Cryptographic collaborators used by the EIP-712 pipeline, bundled so they can be swapped."""

from __future__ import annotations

from typing import Callable

import msgspec

from .curves import privkey_to_address, sign_recoverable
from .hashes import keccak256


class Primitives(msgspec.Struct, frozen=True):
    """
    Hash, sign and address-derivation functions.

    Attributes:
        keccak: bytes -> 32-byte Keccak-256 digest.
        ecsign: (privkey, digest) -> (r, s, v) recoverable secp256k1 signature.
        privkey_to_address: privkey -> "0x"-prefixed lowercase address.
    """

    keccak: Callable[[bytes], bytes] = keccak256
    ecsign: Callable[[bytes, bytes], tuple[int, int, int]] = sign_recoverable
    privkey_to_address: Callable[[bytes], str] = privkey_to_address


DEFAULT_PRIMITIVES = Primitives()

__all__: tuple[str, ...] = ("DEFAULT_PRIMITIVES", "Primitives")
