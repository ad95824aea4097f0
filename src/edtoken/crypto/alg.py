"""Signing algorithm interface and by-name registry.

Token dispatchers look an algorithm up by the name carried in a token header
and call ``sign``/``verify`` on it without knowing the concrete key types.
"""
from __future__ import annotations

from typing import Any, Dict, List, Protocol, runtime_checkable

from ..exceptions import UnsupportedAlgorithmError
from .eddsa import EdDSA


@runtime_checkable
class Alg(Protocol):
    name: str

    def sign(self, key: Any, header_and_payload: bytes) -> bytes: ...

    def verify(self, key: Any, header_and_payload: bytes, signature: bytes) -> None: ...


_REGISTRY: Dict[str, Alg] = {}


def register(alg: Alg) -> Alg:
    if not alg.name:
        raise ValueError("Algorithm name must not be empty")
    _REGISTRY[alg.name] = alg
    return alg


def get_alg(name: str) -> Alg:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {name!r}") from None


def algorithms() -> List[str]:
    return sorted(_REGISTRY)


register(EdDSA)

__all__ = ["Alg", "algorithms", "get_alg", "register"]
