"""Loading and generating Ed25519 key files."""
from __future__ import annotations

from .keypair import Ed25519KeyPair
from .loader import (
    load_private_key_eddsa,
    load_public_key_eddsa,
    must_load_eddsa,
    parse_private_key_eddsa,
    parse_public_key_eddsa,
)

__all__ = [
    "Ed25519KeyPair",
    "load_private_key_eddsa",
    "load_public_key_eddsa",
    "must_load_eddsa",
    "parse_private_key_eddsa",
    "parse_public_key_eddsa",
]
