"""
Typed-data model: field definitions, the typed-data document, signatures and the
closed set of field kinds the data encoder dispatches on.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any

import msgspec

from ..abi import is_atomic_type
from ..errors import InvalidSchema, UnsupportedFieldType

EIP712_DOMAIN_TYPE = "EIP712Domain"
EIP191_PREFIX = b"\x19\x01"


class FieldDef(msgspec.Struct, frozen=True):
    """One member of a struct type, e.g. ``{"name": "wallet", "type": "address"}``."""

    name: str
    type: str


Schema = dict[str, list[FieldDef]]


class TypedData(msgspec.Struct, frozen=True):
    """
    An ``eth_signTypedData`` document.

    Attributes:
        types: Struct type name -> ordered field definitions (must include EIP712Domain).
        primary_type: Type of ``message``; serialized as ``primaryType``.
        domain: EIP712Domain values; None until initialized.
        message: Primary type values; None until initialized.
    """

    types: Schema
    primary_type: str = msgspec.field(name="primaryType")
    domain: dict[str, Any] | None = None
    message: dict[str, Any] | None = None


class Signature(msgspec.Struct, frozen=True):
    """Recoverable secp256k1 signature; r and s are 0x-prefixed 32-byte hex."""

    v: int
    r: str
    s: str

    @classmethod
    def from_scalars(cls, r: int, s: int, v: int) -> Signature:
        return cls(v=v, r="0x" + r.to_bytes(32, "big").hex(), s="0x" + s.to_bytes(32, "big").hex())

    def to_bytes(self) -> bytes:
        """65-byte r || s || v form."""
        return bytes.fromhex(self.r[2:]) + bytes.fromhex(self.s[2:]) + bytes([self.v])


class FieldKind(enum.Enum):
    STRING = "string"
    BYTES = "bytes"
    STRUCT = "struct"
    ARRAY = "array"
    ATOMIC = "atomic"


def field_kind(
    schema: Schema,
    field_type: str,
    *,
    owner: str | None = None,
    field: str | None = None,
    depth: int | None = None,
) -> FieldKind:
    """
    Classify a declared field type.

    Order matters: string/bytes win over a same-named schema entry, and schema
    entries win over the array check.

    Raises:
        UnsupportedFieldType: field_type is none of the known kinds.
    """
    if field_type == "string":
        return FieldKind.STRING
    if field_type == "bytes":
        return FieldKind.BYTES
    if field_type in schema:
        return FieldKind.STRUCT
    if field_type.endswith("]"):
        return FieldKind.ARRAY
    if is_atomic_type(field_type):
        return FieldKind.ATOMIC
    raise UnsupportedFieldType(
        f"Unknown field type {field_type!r}",
        type_name=owner,
        field=field,
        depth=depth,
    )


def _plain_fields(types: Any) -> Any:
    # FieldDef instances back to dicts so convert sees one input shape
    if not isinstance(types, Mapping):
        return types
    return {
        name: [msgspec.structs.asdict(f) if isinstance(f, FieldDef) else f for f in fields]
        if isinstance(fields, list)
        else fields
        for name, fields in types.items()
    }


def as_schema(types: Any) -> Schema:
    """
    Normalise a JSON-like type mapping into a Schema.

    Returns a fresh mapping; the caller's object is never modified.

    Raises:
        InvalidSchema: types is not a mapping of name -> list of {name, type}.
    """
    try:
        return msgspec.convert(_plain_fields(types), Schema)
    except msgspec.ValidationError as exc:
        raise InvalidSchema(f"Invalid type schema: {exc}") from exc


def as_typed_data(obj: Any) -> TypedData:
    """Accept a TypedData or a plain ``{types, primaryType, domain, message}`` mapping."""
    if isinstance(obj, TypedData):
        return obj
    if isinstance(obj, Mapping) and "types" in obj:
        obj = dict(obj, types=_plain_fields(obj["types"]))
    try:
        return msgspec.convert(obj, TypedData)
    except msgspec.ValidationError as exc:
        raise InvalidSchema(f"Invalid typed data: {exc}") from exc


__all__: tuple[str, ...] = (
    "EIP191_PREFIX",
    "EIP712_DOMAIN_TYPE",
    "FieldDef",
    "FieldKind",
    "Schema",
    "Signature",
    "TypedData",
    "as_schema",
    "as_typed_data",
    "field_kind",
)
