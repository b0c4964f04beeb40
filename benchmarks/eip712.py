"""
Benchmark EIP-712: encode_data, sign_hash and prepare_signature on the Ether Mail
example. Reports time per call.

Run from repo root after pip install -e .:

  python benchmarks/eip712.py
"""

from __future__ import annotations

import time

from typedsign import (
    encode_data,
    keccak_from_string,
    prepare_signature,
    sign_hash,
)

N_TIME = 200
PRIV = keccak_from_string("cow")
TYPES = {
    "EIP712Domain": [
        {"name": "name", "type": "string"},
        {"name": "version", "type": "string"},
        {"name": "chainId", "type": "uint256"},
        {"name": "verifyingContract", "type": "address"},
    ],
    "Person": [
        {"name": "name", "type": "string"},
        {"name": "wallet", "type": "address"},
    ],
    "Mail": [
        {"name": "from", "type": "Person"},
        {"name": "to", "type": "Person"},
        {"name": "contents", "type": "string"},
    ],
}
DOMAIN = {
    "name": "Ether Mail",
    "version": "1",
    "chainId": 1,
    "verifyingContract": "0x" + "cc" * 20,
}
MESSAGE = {
    "from": {"name": "Cow", "wallet": "0x" + "cd" * 20},
    "to": {"name": "Bob", "wallet": "0x" + "bb" * 20},
    "contents": "Hello, Bob!",
}
FULL = {"types": TYPES, "primaryType": "Mail", "domain": DOMAIN, "message": MESSAGE}


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(5):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def main() -> None:
    rows = [
        ("encode_data", _time_per_call(encode_data, TYPES, "Mail", MESSAGE)),
        ("sign_hash", _time_per_call(sign_hash, FULL)),
        (
            "prepare_signature",
            _time_per_call(prepare_signature, FULL, DOMAIN, MESSAGE, PRIV, n=20),
        ),
    ]
    width = max(len(name) for name, _ in rows)
    for name, secs in rows:
        print(f"{name:<{width}}  {secs * 1e6:10.1f} us/call")


if __name__ == "__main__":
    main()
