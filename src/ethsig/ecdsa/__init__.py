"""secp256k1 field and group arithmetic, keys, and recoverable ECDSA."""

from .curve import G, N, P, SECP256K1, CurveParams, Point
from .field import legendre_symbol, mod_inverse, mod_sqrt, reduce, select_root
from .keys import (decode_public_key, derive_public_key, encode_compressed,
                   encode_public_key, encode_uncompressed, generate_private_key,
                   private_key_from_bytes, privkey_to_pubkey, public_key_bytes)
from .signature import Signature, recover_public_key, sign, verify

__all__: tuple[str, ...] = (
    # Curve
    "G",
    "N",
    "P",
    "SECP256K1",
    "CurveParams",
    "Point",
    # Field
    "legendre_symbol",
    "mod_inverse",
    "mod_sqrt",
    "reduce",
    "select_root",
    # Keys
    "decode_public_key",
    "derive_public_key",
    "encode_compressed",
    "encode_public_key",
    "encode_uncompressed",
    "generate_private_key",
    "private_key_from_bytes",
    "privkey_to_pubkey",
    "public_key_bytes",
    # Signatures
    "Signature",
    "recover_public_key",
    "sign",
    "verify",
)
