
from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey
)

from ..exceptions import InvalidKeyError, TokenSignatureError

EDDSA = "EdDSA"

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = SEED_SIZE + PUBLIC_KEY_SIZE
SIGNATURE_SIZE = 64


class PublicKey(bytes):
    """Raw 32-byte Ed25519 public key"""

    def __repr__(self) -> str:
        return f"PublicKey({self.hex()})"


class PrivateKey(bytes):
    """Raw 64-byte Ed25519 private key: the seed followed by the public key"""

    @classmethod
    def from_seed(cls, seed: bytes) -> PrivateKey:
        if len(seed) != SEED_SIZE:
            raise InvalidKeyError(f"Ed25519 seed must be {SEED_SIZE} bytes, got {len(seed)}")
        public = Ed25519PrivateKey.from_private_bytes(bytes(seed)).public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )
        return cls(bytes(seed) + public)

    @property
    def seed(self) -> bytes:
        return bytes(self[:SEED_SIZE])

    def public_key(self) -> PublicKey:
        return PublicKey(self[SEED_SIZE:])

    def __repr__(self) -> str:
        return "PrivateKey(<redacted>)"


Key = Union[PrivateKey, PublicKey]


@dataclass(frozen=True)
class AlgEdDSA:
    """EdDSA over Ed25519 for signing token header and payload bytes.

    ``sign`` only accepts a PrivateKey. ``verify`` accepts a PublicKey or a
    PrivateKey, in which case its public half is used. Wrong key types and
    lengths raise InvalidKeyError, failed verification raises
    TokenSignatureError, so callers can tell misconfiguration apart from a
    forged token.
    """

    name: str = EDDSA

    def sign(self, key: Key, header_and_payload: bytes) -> bytes:
        if not isinstance(key, PrivateKey):
            raise InvalidKeyError(f"{self.name}: sign requires a PrivateKey, got {type(key).__name__}")
        if len(key) != PRIVATE_KEY_SIZE:
            raise InvalidKeyError(f"{self.name}: private key must be {PRIVATE_KEY_SIZE} bytes, got {len(key)}")
        return Ed25519PrivateKey.from_private_bytes(key.seed).sign(bytes(header_and_payload))

    def verify(self, key: Key, header_and_payload: bytes, signature: bytes) -> None:
        if isinstance(key, PublicKey):
            public = key
        elif isinstance(key, PrivateKey):
            if len(key) != PRIVATE_KEY_SIZE:
                raise InvalidKeyError(f"{self.name}: private key must be {PRIVATE_KEY_SIZE} bytes, got {len(key)}")
            public = key.public_key()
        else:
            raise InvalidKeyError(f"{self.name}: verify requires a PublicKey or PrivateKey, got {type(key).__name__}")

        if len(public) != PUBLIC_KEY_SIZE:
            raise InvalidKeyError(f"{self.name}: public key must be {PUBLIC_KEY_SIZE} bytes, got {len(public)}")

        try:
            Ed25519PublicKey.from_public_bytes(bytes(public)).verify(bytes(signature), bytes(header_and_payload))
        except (InvalidSignature, ValueError) as exc:
            raise TokenSignatureError(f"{self.name}: signature verification failed") from exc


EdDSA = AlgEdDSA()


def keys_match(private_key: PrivateKey, public_key: PublicKey) -> bool:
    """Check that ``public_key`` is the public half derived from ``private_key``'s seed"""
    if len(private_key) != PRIVATE_KEY_SIZE or len(public_key) != PUBLIC_KEY_SIZE:
        return False
    derived = PrivateKey.from_seed(private_key[:SEED_SIZE]).public_key()
    return secrets.compare_digest(bytes(derived), bytes(public_key))


__all__ = [
    "AlgEdDSA",
    "EDDSA",
    "EdDSA",
    "Key",
    "PRIVATE_KEY_SIZE",
    "PUBLIC_KEY_SIZE",
    "PrivateKey",
    "PublicKey",
    "SEED_SIZE",
    "SIGNATURE_SIZE",
    "keys_match",
]
