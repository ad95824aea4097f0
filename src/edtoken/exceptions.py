
from __future__ import annotations

"""Central exception hierarchy"""
class EdTokenError(Exception):
    """Base exception for all failures"""


class InvalidKeyError(EdTokenError):
    """Raised when a key has the wrong type or length for the algorithm"""


class TokenSignatureError(EdTokenError):
    """Raised when a signature does not verify against the message"""


class KeyFormatError(EdTokenError, ValueError):
    """Raised when key material cannot be decoded from its file format"""


class MalformedPEMError(KeyFormatError):
    """Raised when no usable PEM block is found"""


class MalformedASN1Error(KeyFormatError):
    """Raised when a PEM payload does not match the expected DER shape"""


class UnsupportedAlgorithmError(EdTokenError):
    """Raised when an algorithm name is not registered"""


__all__ = [
    "EdTokenError",
    "InvalidKeyError",
    "TokenSignatureError",
    "KeyFormatError",
    "MalformedPEMError",
    "MalformedASN1Error",
    "UnsupportedAlgorithmError",
]
