"""EIP-712 hash levels: type hash, struct hash and the final sign hash."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import msgspec

from ..errors import MalformedValue
from ..primitives import DEFAULT_PRIMITIVES, Primitives
from ._encoding import encode_data, encode_type
from ._model import EIP191_PREFIX, EIP712_DOMAIN_TYPE, TypedData, as_typed_data


def type_hash(types: Any, type_name: str, *, primitives: Primitives = DEFAULT_PRIMITIVES) -> bytes:
    """Keccak-256 of the canonical type string of type_name."""
    return primitives.keccak(encode_type(types, type_name).encode("utf-8"))


def struct_hash(
    types: Any,
    type_name: str,
    data: Mapping[str, Any],
    *,
    primitives: Primitives = DEFAULT_PRIMITIVES,
) -> bytes:
    """Keccak-256 of encode_data(types, type_name, data)."""
    return primitives.keccak(encode_data(types, type_name, data, primitives=primitives))


def initialize(typed_data: Any, domain: Mapping[str, Any], message: Mapping[str, Any]) -> TypedData:
    """Return a copy of typed_data with domain and message attached."""
    td = as_typed_data(typed_data)
    return msgspec.structs.replace(td, domain=dict(domain), message=dict(message))


def sign_hash(typed_data: Any, *, primitives: Primitives = DEFAULT_PRIMITIVES) -> bytes:
    """
    Digest to sign: keccak256(0x1901 || domain separator || struct hash of message).

    Args:
        typed_data: TypedData or {types, primaryType, domain, message} mapping with
            domain and message populated.

    Returns:
        32-byte digest.

    Raises:
        MalformedValue: domain or message has not been attached.
    """
    td = as_typed_data(typed_data)
    if td.domain is None:
        raise MalformedValue("Typed data has no domain; initialize it first", field="domain")
    if td.message is None:
        raise MalformedValue("Typed data has no message; initialize it first", field="message")
    domain_separator = struct_hash(td.types, EIP712_DOMAIN_TYPE, td.domain, primitives=primitives)
    message_hash = struct_hash(td.types, td.primary_type, td.message, primitives=primitives)
    return primitives.keccak(EIP191_PREFIX + domain_separator + message_hash)


def hash_typed(
    typed_data: Any,
    domain: Mapping[str, Any],
    message: Mapping[str, Any],
    *,
    primitives: Primitives = DEFAULT_PRIMITIVES,
) -> bytes:
    """
    Struct hash of message under typed_data's primary type (not the sign hash).

    Useful for showing the pre-signature digest of a message.
    """
    td = initialize(typed_data, domain, message)
    return struct_hash(td.types, td.primary_type, td.message, primitives=primitives)


__all__: tuple[str, ...] = (
    "hash_typed",
    "initialize",
    "sign_hash",
    "struct_hash",
    "type_hash",
)
