from __future__ import annotations

from pathlib import Path
from typing import Tuple

import pytest

from edtoken.keys.keypair import Ed25519KeyPair

SEQUENTIAL_SEED = bytes(range(32))
# PrivateKeyInfo { 0, { 1.3.101.112 }, OCTET STRING { OCTET STRING(32) } }
PKCS8_ED25519_PREFIX = bytes.fromhex("302e020100300506032b657004220420")
# SubjectPublicKeyInfo { { 1.3.101.112 }, BIT STRING(256) }
SPKI_ED25519_PREFIX = bytes.fromhex("302a300506032b6570032100")


@pytest.fixture
def keypair() -> Ed25519KeyPair:
    return Ed25519KeyPair.generate()


@pytest.fixture
def key_files(tmp_path: Path, keypair: Ed25519KeyPair) -> Tuple[Path, Path]:
    return keypair.write(tmp_path / "keys")
