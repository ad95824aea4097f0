# Ed25519 key pair generation and PEM serialization.
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..crypto.eddsa import PrivateKey, PublicKey


class Ed25519KeyPair:
    def __init__(self, private: Optional[ed25519.Ed25519PrivateKey] = None, public: Optional[ed25519.Ed25519PublicKey] = None):
        if private is None and public is None:
            raise ValueError("At least one of private or public is required")
        self._priv = private
        self._pub = public or private.public_key()  # type: ignore[union-attr]

    @staticmethod
    def generate() -> "Ed25519KeyPair":
        return Ed25519KeyPair(private=ed25519.Ed25519PrivateKey.generate())

    @staticmethod
    def from_seed(seed: bytes) -> "Ed25519KeyPair":
        return Ed25519KeyPair(private=ed25519.Ed25519PrivateKey.from_private_bytes(PrivateKey.from_seed(seed).seed))

    @staticmethod
    def from_private_key(key: PrivateKey) -> "Ed25519KeyPair":
        return Ed25519KeyPair(private=ed25519.Ed25519PrivateKey.from_private_bytes(key.seed))

    @property
    def private_key(self) -> PrivateKey:
        if self._priv is None:
            raise ValueError("Key pair has no private key")
        seed = self._priv.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        return PrivateKey(seed + self.public_key)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(self._pub.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        ))

    # Serialization
    def public_pem(self) -> bytes:
        return self._pub.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def private_pem_pkcs8(self) -> bytes:
        if self._priv is None:
            raise ValueError("Key pair has no private key")
        return self._priv.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def write(self, out_dir: Path, name: str = "eddsa") -> Tuple[Path, Path]:
        """Write ``<name>_private.pem`` (mode 0600) and ``<name>_public.pem``."""
        out_dir.mkdir(parents=True, exist_ok=True)
        private_path = out_dir / f"{name}_private.pem"
        public_path = out_dir / f"{name}_public.pem"
        private_path.write_bytes(self.private_pem_pkcs8())
        private_path.chmod(0o600)
        public_path.write_bytes(self.public_pem())
        return private_path, public_path


__all__ = ["Ed25519KeyPair"]
