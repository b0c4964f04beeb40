"""
secp256k1 (Ethereum curve): key derivation and deterministic recoverable ECDSA.

Points are handled in Jacobian coordinates (X, Y, Z) with Z == 0 as the point at
infinity; only the final result is converted back to affine.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Iterator

from ..hashes import keccak256

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

_Jacobian = tuple[int, int, int]
_INFINITY: _Jacobian = (0, 1, 0)


def _inverse(a: int, m: int) -> int:
    """Modular inverse of a mod m (extended Euclid)."""
    lo, hi = 1, 0
    low, high = a % m, m
    while low > 1:
        q = high // low
        lo, hi = hi - lo * q, lo
        low, high = high - low * q, low
    if low == 0:
        raise ValueError("no inverse")
    return lo % m


def _double(p: _Jacobian) -> _Jacobian:
    x, y, z = p
    if z == 0 or y == 0:
        return _INFINITY
    ysq = y * y % _P
    s = 4 * x * ysq % _P
    m = 3 * x * x % _P
    nx = (m * m - 2 * s) % _P
    ny = (m * (s - nx) - 8 * ysq * ysq) % _P
    nz = 2 * y * z % _P
    return (nx, ny, nz)


def _add(p: _Jacobian, q: _Jacobian) -> _Jacobian:
    if p[2] == 0:
        return q
    if q[2] == 0:
        return p
    x1, y1, z1 = p
    x2, y2, z2 = q
    z1sq = z1 * z1 % _P
    z2sq = z2 * z2 % _P
    u1 = x1 * z2sq % _P
    u2 = x2 * z1sq % _P
    s1 = y1 * z2sq * z2 % _P
    s2 = y2 * z1sq * z1 % _P
    if u1 == u2:
        if s1 != s2:
            return _INFINITY
        return _double(p)
    h = (u2 - u1) % _P
    r = (s2 - s1) % _P
    hsq = h * h % _P
    hcu = hsq * h % _P
    u1hsq = u1 * hsq % _P
    nx = (r * r - hcu - 2 * u1hsq) % _P
    ny = (r * (u1hsq - nx) - s1 * hcu) % _P
    nz = h * z1 * z2 % _P
    return (nx, ny, nz)


def _multiply_base(k: int) -> tuple[int, int]:
    """k * G in affine coordinates; k must be in [1, n)."""
    acc = _INFINITY
    addend: _Jacobian = (_Gx, _Gy, 1)
    while k:
        if k & 1:
            acc = _add(acc, addend)
        addend = _double(addend)
        k >>= 1
    x, y, z = acc
    if z == 0:
        raise ValueError("point at infinity")
    zinv = _inverse(z, _P)
    zinv2 = zinv * zinv % _P
    return (x * zinv2 % _P, y * zinv2 * zinv % _P)


def _secret_scalar(privkey: bytes) -> int:
    if len(privkey) != 32:
        raise ValueError("privkey must be 32 bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= _N:
        raise ValueError("invalid privkey")
    return d


def privkey_to_pubkey(privkey: bytes) -> bytes:
    """
    Derive uncompressed public key (65 bytes: 0x04 || x || y) from 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.

    Returns:
        65-byte uncompressed public key.
    """
    x, y = _multiply_base(_secret_scalar(privkey))
    return b"\x04" + x.to_bytes(32, "big") + y.to_bytes(32, "big")


def privkey_to_address(privkey: bytes) -> str:
    """
    Ethereum address (0x + 40 lowercase hex) from 32-byte private key.

    The address is the last 20 bytes of keccak256(x || y); the 0x04 prefix of the
    uncompressed key is not hashed.
    """
    pub = privkey_to_pubkey(privkey)
    return "0x" + keccak256(pub[1:])[12:].hex()


def _rfc6979_nonces(d: int, msg_hash: bytes) -> Iterator[int]:
    """Candidate nonces per RFC 6979 section 3.2 with HMAC-SHA256 (qlen == hlen == 256)."""

    def mac(key: bytes, data: bytes) -> bytes:
        return hmac.new(key, data, hashlib.sha256).digest()

    x = d.to_bytes(32, "big")
    h = (int.from_bytes(msg_hash, "big") % _N).to_bytes(32, "big")
    v = b"\x01" * 32
    k = b"\x00" * 32
    k = mac(k, v + b"\x00" + x + h)
    v = mac(k, v)
    k = mac(k, v + b"\x01" + x + h)
    v = mac(k, v)
    while True:
        v = mac(k, v)
        candidate = int.from_bytes(v, "big")
        if 1 <= candidate < _N:
            yield candidate
        k = mac(k, v + b"\x00")
        v = mac(k, v)


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> tuple[int, int, int]:
    """
    Deterministic ECDSA signature with recovery id.

    The nonce follows RFC 6979, s is normalised to the lower half of the group
    order (flipping the recovery id when it is), so output matches libsecp256k1.

    Args:
        privkey: 32-byte private key.
        msg_hash: 32-byte message hash to sign.

    Returns:
        (r, s, v) where v is 27 or 28 for Ethereum-style recovery.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    d = _secret_scalar(privkey)
    z = int.from_bytes(msg_hash, "big")
    for k in _rfc6979_nonces(d, msg_hash):
        rx, ry = _multiply_base(k)
        r = rx % _N
        if r == 0:
            continue
        s = _inverse(k, _N) * (z + r * d) % _N
        if s == 0:
            continue
        recid = (ry & 1) | (2 if rx >= _N else 0)
        if s > _N // 2:
            s = _N - s
            recid ^= 1
        return (r, s, 27 + recid)
    raise ValueError("nonce generator exhausted")


__all__: tuple[str, ...] = (
    "privkey_to_address",
    "privkey_to_pubkey",
    "sign_recoverable",
)
