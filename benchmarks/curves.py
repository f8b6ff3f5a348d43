"""
Benchmark the secp256k1 engine: key derivation, sign, verify, recover.

Reports whether the field/curve modules were loaded as compiled extensions
(cythonized by setup.py) or as the pure-Python sources.

Run from repo root:

  PYTHONPATH=src python benchmarks/curves.py

Or after pip install -e .:

  python benchmarks/curves.py
"""

from __future__ import annotations

import argparse
import os
import sys
import time

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from ethsig.ecdsa import G, Signature, curve, derive_public_key, field
from ethsig.hashes import keccak256

PRIV = 0xB4D39783863980D393EF99E0B68711A407B4CDB92CAB6A27899AF9A178A01C93
MSG_HASH = keccak256(b"message to sign")


def _kind(module) -> str:
    return "pure Python" if module.__file__.endswith(".py") else "compiled"


def _time_it(fn, *args, n: int = 20) -> float:
    # Warmup
    for _ in range(2):
        fn(*args)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args)
    return (time.perf_counter() - start) / n


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("-n", type=int, default=20, help="iterations per operation")
    args = ap.parse_args()

    print(f"field: {_kind(field)}, curve: {_kind(curve)}")
    print(f"  Iterations: {args.n}")
    print()

    pub = derive_public_key(PRIV)
    sig = Signature.create(PRIV, MSG_HASH)
    ops = (
        ("G * 2", G.multiply, 2),
        ("derive_public_key", derive_public_key, PRIV),
        ("Signature.create", Signature.create, PRIV, MSG_HASH),
        ("Signature.verify", sig.verify, MSG_HASH, pub),
        ("recover_public_key", sig.recover_public_key, MSG_HASH),
        ("ecrecover", sig.ecrecover, MSG_HASH),
    )
    for name, fn, *fn_args in ops:
        t = _time_it(fn, *fn_args, n=args.n)
        print(f"  {name:<20} {t * 1e3:8.2f} ms")


if __name__ == "__main__":
    main()
