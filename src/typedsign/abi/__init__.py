"""Fixed-width ABI word encoding for atomic Solidity types."""

from .encoding import encode_abi, encode_single, is_atomic_type

__all__: tuple[str, ...] = ("encode_abi", "encode_single", "is_atomic_type")
