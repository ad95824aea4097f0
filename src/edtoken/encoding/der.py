"""ASN.1 shapes of the two Ed25519 key wrappers.

PKCS#8 OneAsymmetricKey (RFC 5208 / RFC 8410)::

    SEQUENCE {
        INTEGER version,
        SEQUENCE { OBJECT IDENTIFIER algorithm, ANY parameters OPTIONAL },
        OCTET STRING privateKey,          -- wraps OCTET STRING(32) seed
        [0] Attributes OPTIONAL,
        [1] BIT STRING publicKey OPTIONAL
    }

SubjectPublicKeyInfo (RFC 5280)::

    SEQUENCE {
        SEQUENCE { OBJECT IDENTIFIER algorithm, ANY parameters OPTIONAL },
        BIT STRING subjectPublicKey
    }

The algorithm is decoded but not interpreted, so the private key field is
declared as a plain OCTET STRING instead of going through
``asn1crypto.keys.PrivateKeyInfo``, which selects its type by algorithm.
"""
from __future__ import annotations

from typing import NamedTuple

from asn1crypto import core

from ..exceptions import MalformedASN1Error

SEED_SIZE = 32
# DER prefix of the OCTET STRING that carries the seed: tag 0x04, length 32.
SEED_PREFIX = bytes((0x04, SEED_SIZE))

_DECODE_ERRORS = (ValueError, TypeError, IndexError, OverflowError)


class _AlgorithmIdentifier(core.Sequence):
    _fields = [
        ("algorithm", core.ObjectIdentifier),
        ("parameters", core.Any, {"optional": True}),
    ]


class _Attributes(core.SetOf):
    _child_spec = core.Any


class _OneAsymmetricKey(core.Sequence):
    _fields = [
        ("version", core.Integer),
        ("private_key_algorithm", _AlgorithmIdentifier),
        ("private_key", core.OctetString),
        ("attributes", _Attributes, {"implicit": 0, "optional": True}),
        ("public_key", core.OctetBitString, {"implicit": 1, "optional": True}),
    ]


class _SubjectPublicKeyInfo(core.Sequence):
    _fields = [
        ("algorithm", _AlgorithmIdentifier),
        ("public_key", core.OctetBitString),
    ]


class PrivateKeyInfo(NamedTuple):
    version: int
    algorithm: str
    private_key: bytes


class SubjectPublicKeyInfo(NamedTuple):
    algorithm: str
    public_key: bytes


def parse_private_key_info(der: bytes) -> PrivateKeyInfo:
    try:
        info = _OneAsymmetricKey.load(der)
        return PrivateKeyInfo(
            version=info["version"].native,
            algorithm=info["private_key_algorithm"]["algorithm"].dotted,
            private_key=info["private_key"].native,
        )
    except _DECODE_ERRORS as exc:
        raise MalformedASN1Error(f"asn1: invalid PrivateKeyInfo: {exc}") from exc


def parse_subject_public_key_info(der: bytes) -> SubjectPublicKeyInfo:
    try:
        info = _SubjectPublicKeyInfo.load(der)
        algorithm = info["algorithm"]["algorithm"].dotted
        contents = info["public_key"].contents
    except _DECODE_ERRORS as exc:
        raise MalformedASN1Error(f"asn1: invalid SubjectPublicKeyInfo: {exc}") from exc
    # First content octet of a BIT STRING is the unused-bits count.
    if not contents:
        raise MalformedASN1Error("asn1: zero length BIT STRING")
    if contents[0] != 0:
        raise MalformedASN1Error("asn1: public key BIT STRING has unused bits")
    return SubjectPublicKeyInfo(algorithm=algorithm, public_key=bytes(contents[1:]))


def extract_seed(private_key: bytes) -> bytes:
    """Unwrap the inner ``OCTET STRING`` holding the 32-byte seed."""
    if len(private_key) != len(SEED_PREFIX) + SEED_SIZE:
        raise MalformedASN1Error(
            f"asn1: private key field is {len(private_key)} bytes, expected {len(SEED_PREFIX) + SEED_SIZE}"
        )
    if private_key[:len(SEED_PREFIX)] != SEED_PREFIX:
        raise MalformedASN1Error(
            f"asn1: unexpected private key prefix {private_key[:len(SEED_PREFIX)].hex()}, expected {SEED_PREFIX.hex()}"
        )
    return private_key[len(SEED_PREFIX):]


__all__ = [
    "PrivateKeyInfo",
    "SEED_PREFIX",
    "SEED_SIZE",
    "SubjectPublicKeyInfo",
    "extract_seed",
    "parse_private_key_info",
    "parse_subject_public_key_info",
]
