"""PEM armor handling on top of ``asn1crypto.pem``.

Only the textual envelope is handled here; what the payload means is decided
by the DER layer. The first block in the input is used and anything after it
is ignored.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Union

from asn1crypto import pem

ENCRYPTED_PROC_TYPE = "4,ENCRYPTED"


@dataclass(frozen=True)
class PemBlock:
    """A decoded PEM block"""

    type: str
    data: bytes
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def encrypted(self) -> bool:
        return self.headers.get("Proc-Type", "").replace(" ", "") == ENCRYPTED_PROC_TYPE


def decode_pem(data: Union[bytes, str]) -> Optional[PemBlock]:
    """Return the first PEM block in ``data``, or ``None`` when there is none."""
    if isinstance(data, str):
        data = data.encode("ascii", "replace")
    # unarmor stops without raising when a BEGIN line is never closed
    try:
        block_type, headers, der = pem.unarmor(bytes(data), multiple=False)
    except (ValueError, TypeError, StopIteration):
        return None
    return PemBlock(type=block_type, data=der, headers=dict(headers))


def encode_pem(block_type: str, data: bytes, headers: Optional[Mapping[str, str]] = None) -> bytes:
    return pem.armor(block_type, data, headers=dict(headers) if headers else None)


__all__ = ["ENCRYPTED_PROC_TYPE", "PemBlock", "decode_pem", "encode_pem"]
