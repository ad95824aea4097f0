"""EdDSA (Ed25519) token signing and PEM key loading."""
from __future__ import annotations

from .crypto import (
    EDDSA,
    Alg,
    AlgEdDSA,
    EdDSA,
    PrivateKey,
    PublicKey,
    algorithms,
    get_alg,
    keys_match,
    register,
)
from .exceptions import (
    EdTokenError,
    InvalidKeyError,
    KeyFormatError,
    MalformedASN1Error,
    MalformedPEMError,
    TokenSignatureError,
    UnsupportedAlgorithmError,
)
from .keys import (
    Ed25519KeyPair,
    load_private_key_eddsa,
    load_public_key_eddsa,
    must_load_eddsa,
    parse_private_key_eddsa,
    parse_public_key_eddsa,
)

__version__ = "0.1.0"

__all__ = [
    "Alg",
    "AlgEdDSA",
    "EDDSA",
    "EdDSA",
    "EdTokenError",
    "Ed25519KeyPair",
    "InvalidKeyError",
    "KeyFormatError",
    "MalformedASN1Error",
    "MalformedPEMError",
    "PrivateKey",
    "PublicKey",
    "TokenSignatureError",
    "UnsupportedAlgorithmError",
    "algorithms",
    "get_alg",
    "keys_match",
    "load_private_key_eddsa",
    "load_public_key_eddsa",
    "must_load_eddsa",
    "parse_private_key_eddsa",
    "parse_public_key_eddsa",
    "register",
]
