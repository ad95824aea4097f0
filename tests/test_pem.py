from __future__ import annotations

import pytest

from edtoken.encoding.pem import PemBlock, decode_pem, encode_pem


def test_decode_returns_first_block() -> None:
    first = encode_pem("PRIVATE KEY", b"first")
    second = encode_pem("PUBLIC KEY", b"second")
    assert decode_pem(first + second) == PemBlock(type="PRIVATE KEY", data=b"first")


def test_decode_skips_leading_text() -> None:
    block = decode_pem(b"Key for staging\n\n" + encode_pem("PUBLIC KEY", b"\x01\x02\x03"))
    assert block is not None
    assert block.type == "PUBLIC KEY"
    assert block.data == b"\x01\x02\x03"


@pytest.mark.parametrize("data", [b"", b"not a pem file", b"-----BEGIN PUBLIC KEY-----\nAAAA\n"])
def test_decode_without_block(data: bytes) -> None:
    assert decode_pem(data) is None


def test_decode_rejects_bad_base64() -> None:
    broken = b"-----BEGIN PUBLIC KEY-----\nnotbase64\n-----END PUBLIC KEY-----\n"
    assert decode_pem(broken) is None


def test_decode_handles_crlf() -> None:
    block = decode_pem(encode_pem("PRIVATE KEY", b"x" * 100).replace(b"\n", b"\r\n"))
    assert block is not None
    assert block.data == b"x" * 100


def test_decode_accepts_text() -> None:
    block = decode_pem(encode_pem("PUBLIC KEY", b"abc").decode("ascii"))
    assert block is not None
    assert block.data == b"abc"


def test_headers_and_encrypted_flag() -> None:
    data = encode_pem(
        "PRIVATE KEY",
        b"secret",
        headers={"Proc-Type": "4,ENCRYPTED", "DEK-Info": "AES-128-CBC,00112233"},
    )
    block = decode_pem(data)
    assert block is not None
    assert block.headers == {"Proc-Type": "4,ENCRYPTED", "DEK-Info": "AES-128-CBC,00112233"}
    assert block.encrypted
    assert block.data == b"secret"


def test_plain_block_is_not_encrypted() -> None:
    block = decode_pem(encode_pem("PUBLIC KEY", b"abc"))
    assert block is not None
    assert not block.encrypted


def test_encode_wraps_at_64_columns() -> None:
    lines = encode_pem("PUBLIC KEY", bytes(range(100))).splitlines()
    assert lines[0] == b"-----BEGIN PUBLIC KEY-----"
    assert lines[-1] == b"-----END PUBLIC KEY-----"
    assert all(len(line) <= 64 for line in lines[1:-1])
    assert len(lines[1]) == 64
