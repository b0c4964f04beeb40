"""EIP-712 typed structured data: encoding, hashing and signing."""

from ._encoding import encode_data, encode_type, find_dependencies
from ._hashing import hash_typed, initialize, sign_hash, struct_hash, type_hash
from ._model import (
    EIP191_PREFIX,
    EIP712_DOMAIN_TYPE,
    FieldDef,
    FieldKind,
    Signature,
    TypedData,
    field_kind,
)
from ._signer import prepare_signature, sign

__all__: tuple[str, ...] = (
    "EIP191_PREFIX",
    "EIP712_DOMAIN_TYPE",
    "FieldDef",
    "FieldKind",
    "Signature",
    "TypedData",
    "encode_data",
    "encode_type",
    "field_kind",
    "find_dependencies",
    "hash_typed",
    "initialize",
    "prepare_signature",
    "sign",
    "sign_hash",
    "struct_hash",
    "type_hash",
)
