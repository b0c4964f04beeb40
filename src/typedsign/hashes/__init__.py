"""Hash functions: Keccak-256."""

from .keccak import keccak256, keccak_from_string

__all__: tuple[str, ...] = ("keccak256", "keccak_from_string")
