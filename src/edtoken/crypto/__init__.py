
from __future__ import annotations

from .alg import Alg, algorithms, get_alg, register
from .eddsa import (
    EDDSA,
    AlgEdDSA,
    EdDSA,
    PrivateKey,
    PublicKey,
    keys_match,
)

__all__ = [
    "Alg",
    "AlgEdDSA",
    "EDDSA",
    "EdDSA",
    "PrivateKey",
    "PublicKey",
    "algorithms",
    "get_alg",
    "keys_match",
    "register",
]
