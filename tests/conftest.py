"""Shared Ether Mail fixtures (the EIP-712 reference example)."""

from __future__ import annotations

from typing import Any

import pytest

from typedsign import keccak_from_string

MAIL_TYPES: dict[str, list[dict[str, str]]] = {
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


@pytest.fixture
def mail_types() -> dict[str, list[dict[str, str]]]:
    return {name: [dict(f) for f in fields] for name, fields in MAIL_TYPES.items()}


@pytest.fixture
def mail_domain() -> dict[str, Any]:
    return {
        "name": "Ether Mail",
        "version": "1",
        "chainId": 1,
        "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
    }


@pytest.fixture
def mail_message() -> dict[str, Any]:
    return {
        "from": {
            "name": "Cow",
            "wallet": "0xCD2a3d9F938E13CD947Ec05AbC7FE734Df8DD826",
        },
        "to": {
            "name": "Bob",
            "wallet": "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB",
        },
        "contents": "Hello, Bob!",
    }


@pytest.fixture
def mail_typed_data(mail_types, mail_domain, mail_message) -> dict[str, Any]:
    return {
        "types": mail_types,
        "primaryType": "Mail",
        "domain": mail_domain,
        "message": mail_message,
    }


@pytest.fixture
def cow_key() -> bytes:
    return keccak_from_string("cow", 256)
