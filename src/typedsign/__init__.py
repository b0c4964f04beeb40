"""
EIP-712 typed-data hashing and signing: keccak256, secp256k1, fixed-width ABI words.
Pure Python apart from msgspec for the typed-data model.
"""

from .__about__ import __version__
from .abi import encode_abi, encode_single
from .curves import privkey_to_address, privkey_to_pubkey, sign_recoverable
from .eip712 import (
    FieldDef,
    Signature,
    TypedData,
    encode_data,
    encode_type,
    find_dependencies,
    hash_typed,
    initialize,
    prepare_signature,
    sign,
    sign_hash,
    struct_hash,
    type_hash,
)
from .errors import (
    CyclicDataError,
    InvalidKeyForAddress,
    InvalidSchema,
    MalformedValue,
    TypedDataError,
    UnknownRootType,
    UnsupportedFieldType,
)
from .hashes import keccak256, keccak_from_string
from .primitives import DEFAULT_PRIMITIVES, Primitives
from .serde import decode_typed_data, encode_typed_data

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "keccak256",
    "keccak_from_string",
    # ABI words
    "encode_abi",
    "encode_single",
    # Curves: secp256k1
    "privkey_to_address",
    "privkey_to_pubkey",
    "sign_recoverable",
    # Collaborators
    "DEFAULT_PRIMITIVES",
    "Primitives",
    # EIP-712
    "FieldDef",
    "Signature",
    "TypedData",
    "encode_data",
    "encode_type",
    "find_dependencies",
    "hash_typed",
    "initialize",
    "prepare_signature",
    "sign",
    "sign_hash",
    "struct_hash",
    "type_hash",
    # Serde
    "decode_typed_data",
    "encode_typed_data",
    # Errors
    "CyclicDataError",
    "InvalidKeyForAddress",
    "InvalidSchema",
    "MalformedValue",
    "TypedDataError",
    "UnknownRootType",
    "UnsupportedFieldType",
)
