
import base64


def b64d(value: str) -> bytes:
    """base64url decode that tolerates missing padding and rejects foreign characters"""
    pad = "=" * (-len(value) % 4)
    return base64.b64decode((value + pad).encode("ascii"), altchars=b"-_", validate=True)
