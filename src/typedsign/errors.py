"""Exceptions raised while encoding, hashing or signing typed data."""

from __future__ import annotations


class TypedDataError(ValueError):
    """
    Base class for typed-data failures.

    Attributes:
        type_name: Struct type being encoded when the failure happened, if any.
        field: Offending field name, if any.
        depth: Struct nesting depth (0 for the root type), if known.
    """

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        field: str | None = None,
        depth: int | None = None,
    ) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.field = field
        self.depth = depth


class UnsupportedFieldType(TypedDataError):
    """Field type is an array or not a recognised atomic type."""


class UnknownRootType(TypedDataError):
    """Root type name is not declared in the schema."""


class MalformedValue(TypedDataError):
    """Runtime value is missing or does not fit its declared type."""


class CyclicDataError(TypedDataError):
    """A struct type was re-entered while encoding its own value."""


class InvalidSchema(TypedDataError):
    """Schema or typed-data document does not have the expected shape."""


class InvalidKeyForAddress(TypedDataError):
    """Private key does not derive the address the caller expected."""

    def __init__(self, derived_address: str, expected_address: str) -> None:
        super().__init__(f"Invalid private key for address {expected_address}: derives {derived_address}")
        self.derived_address = derived_address
        self.expected_address = expected_address


class AbiEncodingError(ValueError):
    """Value cannot be packed into a 32-byte ABI word for its type tag."""

    def __init__(self, message: str, *, type_tag: str, position: int | None = None) -> None:
        super().__init__(message)
        self.type_tag = type_tag
        self.position = position


__all__: tuple[str, ...] = (
    "AbiEncodingError",
    "CyclicDataError",
    "InvalidKeyForAddress",
    "InvalidSchema",
    "MalformedValue",
    "TypedDataError",
    "UnknownRootType",
    "UnsupportedFieldType",
)
