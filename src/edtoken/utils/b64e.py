
import base64


def b64e(data: bytes) -> str:
    """base64url encode without padding, as used in compact token segments"""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
