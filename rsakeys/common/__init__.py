"""Common definitions: key kinds and formats, PEM model, settings."""

from .types import KeyKind, KeyFormat, PRIVATE_KEY_LABEL, PUBLIC_KEY_LABEL
from .envelope import PEMEnvelope
from .utils import b64e, b64d, sha256_hex

__all__ = [
    "KeyKind",
    "KeyFormat",
    "PRIVATE_KEY_LABEL",
    "PUBLIC_KEY_LABEL",
    "PEMEnvelope",
    "b64e",
    "b64d",
    "sha256_hex",
]
