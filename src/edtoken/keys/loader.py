"""Load Ed25519 keys from PEM files.

``parse_*`` work on bytes already in memory, ``load_*`` read a file first and
``must_load_eddsa`` is the startup-time variant that aborts the process
instead of returning an error. Do not call it while serving requests.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Tuple, Union

from ..crypto.eddsa import PrivateKey, PublicKey
from ..encoding.der import extract_seed, parse_private_key_info, parse_subject_public_key_info
from ..encoding.pem import PemBlock, decode_pem
from ..exceptions import EdTokenError, MalformedPEMError
from ..logging import get_logger

PathLike = Union[str, "os.PathLike[str]"]

_log = get_logger("edtoken.keys")


def _read_file(path: PathLike) -> bytes:
    return Path(path).read_bytes()


# Replaceable file reader, e.g. to load keys from an embedded filesystem.
read_file = _read_file


def _decode_block(data: bytes, kind: str) -> PemBlock:
    block = decode_pem(data)
    if block is None:
        raise MalformedPEMError(f"{kind}: malformed or missing PEM format (EdDSA)")
    if block.encrypted:
        raise MalformedPEMError(f"{kind}: encrypted PEM blocks are not supported (EdDSA)")
    return block


def parse_private_key_eddsa(key: bytes) -> PrivateKey:
    """Decode a PEM-encoded PKCS#8 Ed25519 private key.

    Pass the result to ``EdDSA.sign``.
    """
    block = _decode_block(key, "private key")
    info = parse_private_key_info(block.data)
    return PrivateKey.from_seed(extract_seed(info.private_key))


def parse_public_key_eddsa(key: bytes) -> PublicKey:
    """Decode a PEM-encoded SubjectPublicKeyInfo Ed25519 public key.

    Pass the result to ``EdDSA.verify``.
    """
    block = _decode_block(key, "public key")
    info = parse_subject_public_key_info(block.data)
    return PublicKey(info.public_key)


def load_private_key_eddsa(filename: PathLike) -> PrivateKey:
    key = parse_private_key_eddsa(read_file(filename))
    _log.debug("key.loaded", path=str(filename), kind="private")
    return key


def load_public_key_eddsa(filename: PathLike) -> PublicKey:
    key = parse_public_key_eddsa(read_file(filename))
    _log.debug("key.loaded", path=str(filename), kind="public")
    return key


def must_load_eddsa(private_key_filename: PathLike, public_key_filename: PathLike) -> Tuple[PrivateKey, PublicKey]:
    """Load a private/public key pair or abort the process.

    Intended for application startup only. Any failure is logged and turned
    into ``SystemExit`` chained to the original error.
    """
    try:
        private_key = load_private_key_eddsa(private_key_filename)
        public_key = load_public_key_eddsa(public_key_filename)
    except (OSError, EdTokenError) as exc:
        _log.critical(
            "key.load_failed",
            private_key=str(private_key_filename),
            public_key=str(public_key_filename),
            error=str(exc),
        )
        raise SystemExit(f"edtoken: cannot load EdDSA keys: {exc}") from exc
    return private_key, public_key


__all__ = [
    "load_private_key_eddsa",
    "load_public_key_eddsa",
    "must_load_eddsa",
    "parse_private_key_eddsa",
    "parse_public_key_eddsa",
    "read_file",
]
