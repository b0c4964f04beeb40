"""
Keccak-256 as used by Ethereum (original Keccak padding, not NIST SHA3).
Pure Python; the state is kept as a flat list of 25 64-bit lanes indexed x + 5*y.
"""

from __future__ import annotations

_MASK = (1 << 64) - 1
_RATE = 136  # bytes, i.e. 1088-bit rate for a 256-bit digest

_ROUND_CONSTANTS = (
    0x0000000000000001,
    0x0000000000008082,
    0x800000000000808A,
    0x8000000080008000,
    0x000000000000808B,
    0x0000000080000001,
    0x8000000080008081,
    0x8000000000008009,
    0x000000000000008A,
    0x0000000000000088,
    0x0000000080008009,
    0x000000008000000A,
    0x000000008000808B,
    0x800000000000008B,
    0x8000000000008089,
    0x8000000000008003,
    0x8000000000008002,
    0x8000000000000080,
    0x000000000000800A,
    0x800000008000000A,
    0x8000000080008081,
    0x8000000000008080,
    0x0000000080000001,
    0x8000000080008008,
)

# Rotation offsets, same flat x + 5*y indexing as the state.
_RHO = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)


def _rotl(v: int, n: int) -> int:
    return ((v << n) | (v >> (64 - n))) & _MASK


def _permute(lanes: list[int]) -> None:
    """Keccak-f[1600]: 24 rounds over the lanes, in place."""
    for rc in _ROUND_CONSTANTS:
        # theta
        parity = [
            lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20]
            for x in range(5)
        ]
        for x in range(5):
            d = parity[(x - 1) % 5] ^ _rotl(parity[(x + 1) % 5], 1)
            for y in range(0, 25, 5):
                lanes[x + y] ^= d
        # rho + pi
        moved = [0] * 25
        for x in range(5):
            for y in range(5):
                src = x + 5 * y
                moved[y + 5 * ((2 * x + 3 * y) % 5)] = _rotl(lanes[src], _RHO[src])
        # chi
        for y in range(0, 25, 5):
            row = moved[y : y + 5]
            for x in range(5):
                lanes[y + x] = row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5])
        # iota
        lanes[0] ^= rc


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 digest of data.

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    padded = bytearray(data)
    padded.append(0x01)
    padded.extend(bytes(-len(padded) % _RATE))
    padded[-1] |= 0x80

    lanes = [0] * 25
    for start in range(0, len(padded), _RATE):
        block = padded[start : start + _RATE]
        for i in range(_RATE // 8):
            lanes[i] ^= int.from_bytes(block[8 * i : 8 * i + 8], "little")
        _permute(lanes)
    return b"".join(lane.to_bytes(8, "little") for lane in lanes[:4])


def keccak_from_string(text: str, bits: int = 256) -> bytes:
    """Keccak digest of the UTF-8 encoding of text. Only 256-bit output is supported."""
    if bits != 256:
        raise ValueError(f"unsupported keccak width: {bits}")
    return keccak256(text.encode("utf-8"))


__all__: tuple[str, ...] = ("keccak256", "keccak_from_string")
