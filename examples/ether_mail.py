#!/usr/bin/env python3
"""Example: hash and sign the EIP-712 Ether Mail message."""

from typedsign import (
    hash_typed,
    keccak_from_string,
    prepare_signature,
    privkey_to_address,
    sign_hash,
)

privkey = keccak_from_string("cow")
address = privkey_to_address(privkey)
print("Signer address:", address)

typed_data = {
    "types": {
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
    },
    "primaryType": "Mail",
}
domain = {
    "name": "Ether Mail",
    "version": "1",
    "chainId": 1,
    "verifyingContract": "0xCcCCccccCCCCcCCCCCCcCcCccCcCCCcCcccccccC",
}
message = {
    "from": {"name": "Cow", "wallet": address},
    "to": {"name": "Bob", "wallet": "0xbBbBBBBbbBBBbbbBbbBbbbbBBbBbbbbBbBbbBBbB"},
    "contents": "Hello, Bob!",
}

print("Message struct hash:", hash_typed(typed_data, domain, message).hex())
print("Sign hash:", sign_hash(dict(typed_data, domain=domain, message=message)).hex())
sig = prepare_signature(typed_data, domain, message, privkey, address)
print("Signature (v, r, s):", sig.v, sig.r, sig.s)
