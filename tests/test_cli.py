"""End-to-end runs of the command-line driver."""

from __future__ import annotations

import pytest

from ethsig.address import Address
from ethsig.cli import build_parser, main
from ethsig.ecdsa.curve import Point
from ethsig.ecdsa.keys import derive_public_key, encode_uncompressed

PRIVATE_KEY_HEX = "b4d39783863980d393ef99e0b68711a407b4cdb92cab6a27899af9a178a01c93"
PUBLIC_KEY_HEX = (
    "0476abf7ad93d73818541bb7c5e28fa011e2935f5bf507591693da8594efd23a29"
    "25e325adae63c1111224e964d5b86d32027b61429ea155adf9edb84e6bb3fd46"
)
EXT_SIGNATURE_HEX = (
    "1556a70d76cc452ae54e83bb167a9041f0d062d000fa0dcb42593f77c544f647"
    "1643d14dbd6a6edc658f4b16699a585181a08dba4f6d16a9273e0e2cbed622da"
    "1b"
)
EXT_DIGEST_HEX = "3ea2f1d0abf3fc66cf29eebb70cbd4e7fe762ef8a09bcc06c8edf641230afec0"
EXT_ADDRESS = "0x80c67eec6f8518b5bb707ecc718b53782ac71543"


def _run(capsys: pytest.CaptureFixture, *argv: str) -> tuple[int, str]:
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_address(capsys: pytest.CaptureFixture) -> None:
    code, out = _run(capsys, "address", "--private-key", "0x" + PRIVATE_KEY_HEX)
    assert code == 0
    assert f"Public key: {PUBLIC_KEY_HEX}" in out
    expected = Address.from_public_key(derive_public_key(int(PRIVATE_KEY_HEX, 16)))
    assert f"Address: {expected.checksum()}" in out


def test_sign_verify_recover(capsys: pytest.CaptureFixture) -> None:
    code, out = _run(
        capsys, "sign", "--private-key", PRIVATE_KEY_HEX, "--message", "hello world"
    )
    assert code == 0
    signature_hex = out.strip()
    assert len(signature_hex) == 130

    code, out = _run(
        capsys,
        "verify",
        "--signature",
        signature_hex,
        "--public-key",
        PUBLIC_KEY_HEX,
        "--message",
        "hello world",
    )
    assert (code, out.strip()) == (0, "valid")

    code, out = _run(
        capsys, "recover", "--signature", signature_hex, "--message", "hello world"
    )
    assert code == 0
    public_key = derive_public_key(int(PRIVATE_KEY_HEX, 16))
    assert out.strip() == Address.from_public_key(public_key).checksum()


def test_verify_wrong_message(capsys: pytest.CaptureFixture) -> None:
    code, out = _run(
        capsys,
        "verify",
        "--signature",
        EXT_SIGNATURE_HEX,
        "--public-key",
        PUBLIC_KEY_HEX,
        "--digest",
        EXT_DIGEST_HEX,
    )
    assert (code, out.strip()) == (1, "invalid")


def test_recover_known_signature(capsys: pytest.CaptureFixture) -> None:
    code, out = _run(
        capsys, "recover", "--signature", EXT_SIGNATURE_HEX, "--digest", EXT_DIGEST_HEX
    )
    assert code == 0
    assert out.strip().lower() == EXT_ADDRESS


def test_recover_unrecoverable(capsys: pytest.CaptureFixture) -> None:
    bad = "00" * 64 + "1b"
    code = main(["recover", "--signature", bad, "--digest", EXT_DIGEST_HEX])
    cap = capsys.readouterr()
    assert code == 1
    assert not cap.out
    assert "ethsig:" in cap.err


def test_demo(capsys: pytest.CaptureFixture) -> None:
    code, out = _run(capsys, "demo")
    assert code == 0
    lines = dict(line.split(": ", 1) for line in out.strip().splitlines())
    assert set(lines) == {"Private key", "Address", "Signature", "Ecrecover"}
    assert lines["Address"] == lines["Ecrecover"]
    assert len(lines["Signature"]) == 130
    public_key = derive_public_key(int(lines["Private key"], 16))
    assert str(Address.from_public_key(public_key)) == lines["Address"]
    assert len(encode_uncompressed(public_key)) == 65


def test_demo_is_default(capsys: pytest.CaptureFixture) -> None:
    code, out = _run(capsys)
    assert code == 0
    assert out.startswith("Private key: ")


@pytest.mark.parametrize(
    "argv",
    [
        ["sign", "--private-key", "00", "--message", "x"],
        ["sign", "--private-key", "00" * 32, "--message", "x"],
        ["sign", "--private-key", PRIVATE_KEY_HEX],
        ["sign", "--private-key", PRIVATE_KEY_HEX, "--digest", "abcd"],
        ["recover", "--signature", "00" * 64, "--message", "x"],
        ["verify", "--signature", EXT_SIGNATURE_HEX, "--public-key", "05", "--message", "x"],
        ["address", "--private-key", "not-hex"],
    ],
)
def test_bad_arguments(capsys: pytest.CaptureFixture, argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert not capsys.readouterr().out


def test_public_key_argument_is_point() -> None:
    args = build_parser().parse_args(
        ["verify", "--signature", EXT_SIGNATURE_HEX, "--public-key", PUBLIC_KEY_HEX,
         "--digest", EXT_DIGEST_HEX]
    )
    assert isinstance(args.public_key, Point)
    assert encode_uncompressed(args.public_key).hex() == PUBLIC_KEY_HEX
