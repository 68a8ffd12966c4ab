"""One-way function: HMAC-MD5 of the input keyed by itself, then SHA-256."""

from __future__ import annotations

import hashlib
import hmac


def hmac_md5(data: bytes) -> bytes:
    """Return SHA-256(HMAC-MD5(key=data, message=data))."""
    raw = bytes(data)
    mac = hmac.digest(raw, raw, "md5")
    return hashlib.sha256(mac).digest()