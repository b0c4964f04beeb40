"""
EIP-712 encoding: dependency resolution, canonical type strings and struct data.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..abi import encode_abi
from ..errors import (
    AbiEncodingError,
    CyclicDataError,
    MalformedValue,
    UnknownRootType,
    UnsupportedFieldType,
)
from ..primitives import DEFAULT_PRIMITIVES, Primitives
from ._model import FieldKind, Schema, as_schema, field_kind


def _dependencies(schema: Schema, root: str) -> list[str]:
    """Struct types reachable from root, root included, in depth-first preorder."""
    found: dict[str, None] = {}
    pending = [root]
    while pending:
        name = pending.pop()
        if name in found or name not in schema:
            continue
        found[name] = None
        # reversed so the first declared field is visited first
        pending.extend(f.type for f in reversed(schema[name]))
    return list(found)


def find_dependencies(types: Any, root: str) -> list[str]:
    """
    Collect the struct types root transitively references, root first.

    Primitive type names are skipped and cycles terminate; this never fails for a
    well-formed schema. The order is traversal order, not canonical order.

    Raises:
        InvalidSchema: types is not a mapping of name -> list of {name, type}.
    """
    return _dependencies(as_schema(types), root)


def _encode_type(schema: Schema, root: str) -> str:
    if root not in schema:
        raise UnknownRootType(f"Type {root!r} not in types", type_name=root)
    deps = [t for t in _dependencies(schema, root) if t != root]
    out = []
    for name in [root] + sorted(deps):
        members = ",".join(f"{f.type} {f.name}" for f in schema[name])
        out.append(f"{name}({members})")
    return "".join(out)


def encode_type(types: Any, root: str) -> str:
    """
    Canonical type string, e.g. 'Mail(Person from,Person to,string contents)Person(string name,address wallet)'.

    The root type comes first, the remaining dependencies follow in sorted order.

    Raises:
        UnknownRootType: root is not declared in types.
    """
    return _encode_type(as_schema(types), root)


def _as_raw_bytes(value: object, *, owner: str, field: str, depth: int) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str) and value[:2] in ("0x", "0X"):
        try:
            return bytes.fromhex(value[2:])
        except ValueError:
            pass
    raise MalformedValue(
        f"Field {field!r} of {owner} expects bytes or 0x-hex, got {value!r}",
        type_name=owner,
        field=field,
        depth=depth,
    )


def _encode_struct(
    schema: Schema,
    type_name: str,
    data: object,
    primitives: Primitives,
    active: tuple[str, ...],
) -> bytes:
    depth = len(active)
    if type_name in active:
        raise CyclicDataError(
            f"Type {type_name!r} re-entered via {' -> '.join(active)}",
            type_name=type_name,
            depth=depth,
        )
    if not isinstance(data, Mapping):
        raise MalformedValue(
            f"{type_name} value must be a mapping, got {type(data).__name__}",
            type_name=type_name,
            depth=depth,
        )
    active = active + (type_name,)
    keccak = primitives.keccak

    pairs: list[tuple[str, object]] = [
        ("bytes32", keccak(_encode_type(schema, type_name).encode("utf-8")))
    ]
    names = ["<typehash>"]
    for f in schema[type_name]:
        # declared type is checked before the value: an array field fails even when absent
        kind = field_kind(schema, f.type, owner=type_name, field=f.name, depth=depth)
        if kind is FieldKind.ARRAY:
            raise UnsupportedFieldType(
                f"Array field {f.name!r} ({f.type}) of {type_name} is not supported",
                type_name=type_name,
                field=f.name,
                depth=depth,
            )
        if f.name not in data:
            raise MalformedValue(
                f"Missing field {f.name!r} of {type_name}",
                type_name=type_name,
                field=f.name,
                depth=depth,
            )
        value = data[f.name]
        names.append(f.name)
        if kind is FieldKind.STRING:
            if not isinstance(value, str):
                raise MalformedValue(
                    f"Field {f.name!r} of {type_name} expects str, got {type(value).__name__}",
                    type_name=type_name,
                    field=f.name,
                    depth=depth,
                )
            pairs.append(("bytes32", keccak(value.encode("utf-8"))))
        elif kind is FieldKind.BYTES:
            raw = _as_raw_bytes(value, owner=type_name, field=f.name, depth=depth)
            pairs.append(("bytes32", keccak(raw)))
        elif kind is FieldKind.STRUCT:
            nested = _encode_struct(schema, f.type, value, primitives, active)
            pairs.append(("bytes32", keccak(nested)))
        else:
            pairs.append((f.type, value))

    try:
        return encode_abi(pairs)
    except AbiEncodingError as exc:
        field = names[exc.position] if exc.position is not None else None
        raise MalformedValue(
            f"Field {field!r} of {type_name}: {exc}",
            type_name=type_name,
            field=field,
            depth=depth,
        ) from exc


def encode_data(
    types: Any,
    type_name: str,
    data: Mapping[str, Any],
    *,
    primitives: Primitives = DEFAULT_PRIMITIVES,
) -> bytes:
    """
    Encode struct data as type hash followed by one 32-byte word per field.

    string/bytes fields and nested structs contribute their keccak digest; atomic
    fields are ABI-encoded. The result is not hashed.

    Args:
        types: Type schema (name -> list of {name, type}).
        type_name: Struct type of data.
        data: Field values.
        primitives: Hash primitive provider.

    Returns:
        32 * (1 + number of fields) bytes.

    Raises:
        UnknownRootType: type_name not in types.
        UnsupportedFieldType: an array or unknown field type is reached.
        MalformedValue: a value is missing or does not fit its type.
        CyclicDataError: a struct type recurses into itself.
    """
    schema = as_schema(types)
    if type_name not in schema:
        raise UnknownRootType(f"Type {type_name!r} not in types", type_name=type_name)
    return _encode_struct(schema, type_name, data, primitives, ())


__all__: tuple[str, ...] = ("encode_data", "encode_type", "find_dependencies")
