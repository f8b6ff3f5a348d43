"""Command-line driver: key generation, signing, verification and ecrecover."""

from __future__ import annotations

import argparse
import logging
import sys

from .__about__ import __version__
from .address import Address
from .ecdsa import (N, Point, Signature, decode_public_key, derive_public_key,
                    encode_uncompressed, generate_private_key)
from .exceptions import RecoveryError
from .hashes import keccak256

logger = logging.getLogger(__name__)

DEMO_MESSAGE = b"Hello, world!"


def _hex(text: str) -> bytes:
    digits = text[2:] if text[:2] in ("0x", "0X") else text
    try:
        return bytes.fromhex(digits)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex string: {text!r}") from None


def _private_key(text: str) -> int:
    raw = _hex(text)
    if len(raw) != 32:
        raise argparse.ArgumentTypeError("private key must be 32 bytes")
    d = int.from_bytes(raw, "big")
    if not 0 < d < N:
        raise argparse.ArgumentTypeError("private key out of range")
    return d


def _digest(text: str) -> bytes:
    raw = _hex(text)
    if len(raw) != 32:
        raise argparse.ArgumentTypeError("digest must be 32 bytes")
    return raw


def _signature(text: str) -> Signature:
    sig = Signature.from_bytes(_hex(text))
    if sig is None:
        raise argparse.ArgumentTypeError("signature must be 65 bytes")
    return sig


def _public_key(text: str) -> Point:
    try:
        return decode_public_key(_hex(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _add_digest_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--message", help="UTF-8 text, hashed with keccak256")
    group.add_argument("--digest", type=_digest, help="32-byte digest as hex")


def _resolve_digest(args: argparse.Namespace) -> bytes:
    if args.digest is not None:
        return args.digest
    return keccak256(args.message.encode("utf-8"))


def _cmd_demo(args: argparse.Namespace) -> int:
    private_key = generate_private_key()
    print(f"Private key: {private_key:064x}")
    public_key = derive_public_key(private_key)
    print(f"Address: {Address.from_public_key(public_key)}")
    digest = keccak256(DEMO_MESSAGE)
    signature = Signature.create(private_key, digest)
    print(f"Signature: {signature.to_bytes().hex()}")
    print(f"Ecrecover: {signature.ecrecover(digest)}")
    return 0


def _cmd_address(args: argparse.Namespace) -> int:
    public_key = derive_public_key(args.private_key)
    print(f"Public key: {encode_uncompressed(public_key).hex()}")
    print(f"Address: {Address.from_public_key(public_key).checksum()}")
    return 0


def _cmd_sign(args: argparse.Namespace) -> int:
    digest = _resolve_digest(args)
    logger.debug("signing digest %s", digest.hex())
    print(Signature.create(args.private_key, digest).to_bytes().hex())
    return 0


def _cmd_verify(args: argparse.Namespace) -> int:
    ok = args.signature.verify(_resolve_digest(args), args.public_key)
    print("valid" if ok else "invalid")
    return 0 if ok else 1


def _cmd_recover(args: argparse.Namespace) -> int:
    try:
        address = args.signature.ecrecover(_resolve_digest(args))
    except RecoveryError as e:
        print(f"ethsig: {e}", file=sys.stderr)
        return 1
    print(address.checksum())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ethsig", description="secp256k1 keys and Ethereum-style signatures"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.set_defaults(func=_cmd_demo)
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("demo", help="Generate a key, sign and ecrecover.")
    p.set_defaults(func=_cmd_demo)

    p = subparsers.add_parser("address", help="Public key and address of a private key.")
    p.add_argument("--private-key", type=_private_key, required=True)
    p.set_defaults(func=_cmd_address)

    p = subparsers.add_parser("sign", help="Sign a message or digest.")
    p.add_argument("--private-key", type=_private_key, required=True)
    _add_digest_args(p)
    p.set_defaults(func=_cmd_sign)

    p = subparsers.add_parser("verify", help="Verify a signature against a public key.")
    p.add_argument("--signature", type=_signature, required=True)
    p.add_argument("--public-key", type=_public_key, required=True)
    _add_digest_args(p)
    p.set_defaults(func=_cmd_verify)

    p = subparsers.add_parser("recover", help="Recover the signer address.")
    p.add_argument("--signature", type=_signature, required=True)
    _add_digest_args(p)
    p.set_defaults(func=_cmd_recover)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


__all__: tuple[str, ...] = ("build_parser", "main")
