"""PEM armor and DER structure handling for key files."""
from __future__ import annotations

from .der import (
    PrivateKeyInfo,
    SubjectPublicKeyInfo,
    extract_seed,
    parse_private_key_info,
    parse_subject_public_key_info,
)
from .pem import PemBlock, decode_pem, encode_pem

__all__ = [
    "PemBlock",
    "PrivateKeyInfo",
    "SubjectPublicKeyInfo",
    "decode_pem",
    "encode_pem",
    "extract_seed",
    "parse_private_key_info",
    "parse_subject_public_key_info",
]
