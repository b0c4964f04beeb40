"""
Static ABI encoding: every atomic value becomes one 32-byte word.

Supported tags: uintN / intN (N = 8..256 step 8, bare uint/int = 256), address,
bool and bytesN (N = 1..32). Integers are big-endian, signed ones in two's
complement; addresses are right-aligned; bytesN are left-aligned.
"""

from __future__ import annotations

from typing import Iterable

from ..errors import AbiEncodingError

_WORD = 32


def _parse_tag(tag: str) -> tuple[str, int] | None:
    """Split an atomic tag into (kind, size); size is bits for ints, bytes for bytesN."""
    if tag == "address":
        return ("address", 20)
    if tag == "bool":
        return ("bool", 1)
    if tag in ("uint", "int"):
        return (tag, 256)
    for kind in ("uint", "int", "bytes"):
        if not tag.startswith(kind):
            continue
        suffix = tag[len(kind) :]
        if not suffix.isdigit() or str(int(suffix)) != suffix:
            return None
        size = int(suffix)
        if kind == "bytes":
            return (kind, size) if 1 <= size <= 32 else None
        return (kind, size) if size % 8 == 0 and 8 <= size <= 256 else None
    return None


def is_atomic_type(tag: str) -> bool:
    """True if tag names a fixed-width type this module can encode."""
    return _parse_tag(tag) is not None


def _as_int(tag: str, value: object) -> int:
    if isinstance(value, bool):
        raise AbiEncodingError(f"{tag} expects an integer, got bool", type_tag=tag)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if text[:2] in ("0x", "0X"):
                return int(text[2:], 16)
            return int(text, 10)
        except ValueError:
            raise AbiEncodingError(f"{tag} cannot parse {value!r}", type_tag=tag) from None
    raise AbiEncodingError(f"{tag} expects an integer, got {type(value).__name__}", type_tag=tag)


def _as_bytes(tag: str, value: object) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str) and value[:2] in ("0x", "0X"):
        try:
            return bytes.fromhex(value[2:])
        except ValueError:
            raise AbiEncodingError(f"{tag} got invalid hex {value!r}", type_tag=tag) from None
    raise AbiEncodingError(f"{tag} expects bytes or 0x-hex, got {type(value).__name__}", type_tag=tag)


def encode_single(tag: str, value: object) -> bytes:
    """
    Encode one atomic value as a 32-byte ABI word.

    Args:
        tag: Solidity type, e.g. "uint256", "address", "bytes32".
        value: Python value matching the tag.

    Returns:
        32 bytes.

    Raises:
        AbiEncodingError: unknown tag, wrong value shape or out-of-range value.
    """
    parsed = _parse_tag(tag)
    if parsed is None:
        raise AbiEncodingError(f"Unsupported ABI type {tag!r}", type_tag=tag)
    kind, size = parsed

    if kind == "uint":
        n = _as_int(tag, value)
        if not 0 <= n < 1 << size:
            raise AbiEncodingError(f"{n} out of range for {tag}", type_tag=tag)
        return n.to_bytes(_WORD, "big")

    if kind == "int":
        n = _as_int(tag, value)
        bound = 1 << (size - 1)
        if not -bound <= n < bound:
            raise AbiEncodingError(f"{n} out of range for {tag}", type_tag=tag)
        return n.to_bytes(_WORD, "big", signed=True)

    if kind == "bool":
        if not isinstance(value, int) or value not in (0, 1):
            raise AbiEncodingError(f"bool expects True/False, got {value!r}", type_tag=tag)
        return int(value).to_bytes(_WORD, "big")

    if kind == "address":
        if isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value < 1 << 160:
                raise AbiEncodingError(f"{value} out of range for address", type_tag=tag)
            return value.to_bytes(_WORD, "big")
        raw = _as_bytes(tag, value)
        if len(raw) != size:
            raise AbiEncodingError(f"address must be 20 bytes, got {len(raw)}", type_tag=tag)
        return raw.rjust(_WORD, b"\x00")

    raw = _as_bytes(tag, value)
    if len(raw) > size:
        raise AbiEncodingError(f"{tag} holds at most {size} bytes, got {len(raw)}", type_tag=tag)
    return raw.ljust(_WORD, b"\x00")


def encode_abi(pairs: Iterable[tuple[str, object]]) -> bytes:
    """
    Concatenate the 32-byte words of (tag, value) pairs.

    Raises:
        AbiEncodingError: with ``position`` set to the index of the failing pair.
    """
    out = bytearray()
    for position, (tag, value) in enumerate(pairs):
        try:
            out += encode_single(tag, value)
        except AbiEncodingError as exc:
            exc.position = position
            raise
    return bytes(out)


__all__: tuple[str, ...] = ("encode_abi", "encode_single", "is_atomic_type")
