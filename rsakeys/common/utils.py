"""Helper signatures: b64e, b64d, sha256_hex."""

import base64
import hashlib
from typing import Union


def b64e(b: bytes) -> str:
    """Encode bytes to base64 string."""
    return base64.b64encode(b).decode('ascii')


def b64d(s: Union[bytes, str]) -> bytes:
    """
    Decode a base64 string to bytes, ignoring embedded whitespace.

    Raises:
        binascii.Error if the input is not valid base64
    """
    if isinstance(s, str):
        s = s.encode('ascii')
    return base64.b64decode(b"".join(s.split()), validate=True)


def sha256_hex(data: Union[bytes, str]) -> str:
    """Compute SHA-256 hash and return as hex string."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    return hashlib.sha256(data).hexdigest()
