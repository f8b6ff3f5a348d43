"""
Ethereum-style signatures from first principles: secp256k1 field and group
arithmetic, recoverable ECDSA, keccak256, RLP and addresses. Pure Python; the
field and curve modules are cythonized when a compiler is available.

Not hardened: no constant-time arithmetic or side-channel protection.
"""

from .__about__ import __version__
from .address import Address, privkey_to_address
from .ecdsa import (G, N, P, Point, Signature, decode_public_key,
                    derive_public_key, encode_compressed, encode_uncompressed,
                    generate_private_key, mod_inverse, mod_sqrt,
                    privkey_to_pubkey, public_key_bytes, recover_public_key,
                    sign, verify)
from .exceptions import RecoveryError, RLPDecodingError
from .hashes import keccak256, keccak512
from .serde import rlp_decode, rlp_encode

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "keccak256",
    "keccak512",
    # Serde
    "rlp_decode",
    "rlp_encode",
    # Curve: secp256k1
    "G",
    "N",
    "P",
    "Point",
    "mod_inverse",
    "mod_sqrt",
    # Keys
    "decode_public_key",
    "derive_public_key",
    "encode_compressed",
    "encode_uncompressed",
    "generate_private_key",
    "privkey_to_address",
    "privkey_to_pubkey",
    "public_key_bytes",
    # Signatures
    "Signature",
    "recover_public_key",
    "sign",
    "verify",
    # Addresses
    "Address",
    # Errors
    "RecoveryError",
    "RLPDecodingError",
)
