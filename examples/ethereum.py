#!/usr/bin/env python3
"""Example: key, address, signature and ecrecover over keccak256("Hello, Ethereum")."""

from ethsig import (Address, Signature, derive_public_key,
                    generate_private_key, keccak256, rlp_encode)

private_key = generate_private_key()
public_key = derive_public_key(private_key)
address = Address.from_public_key(public_key)
print("Ethereum address:", address.checksum())

msg_hash = keccak256(b"Hello, Ethereum")
signature = Signature.create(private_key, msg_hash)
print("Signature (r, s, v):", hex(signature.r), hex(signature.s), signature.v)
print("Signature bytes:", signature.to_bytes().hex())
print("Verifies:", signature.verify(msg_hash, public_key))
print("Ecrecover:", signature.ecrecover(msg_hash).checksum())

payload = rlp_encode([address.raw, signature.r, signature.s, signature.v])
print("RLP [address, r, s, v]:", payload.hex()[:32] + "...")
