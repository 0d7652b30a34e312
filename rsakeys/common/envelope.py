"""Pydantic model for a labeled PEM block."""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from .types import KeyKind, PRIVATE_KEY_LABEL, PUBLIC_KEY_LABEL
from .utils import b64e

PEM_LINE_LENGTH = 64


class PEMEnvelope(BaseModel):
    """A PEM block: label plus the raw (base64-decoded) body."""
    model_config = ConfigDict(frozen=True)

    label: str  # text between "BEGIN " and the closing dashes
    body: bytes  # DER bytes

    @property
    def kind(self) -> Optional[KeyKind]:
        """Key kind implied by the label, or None for foreign labels."""
        if self.label == PRIVATE_KEY_LABEL:
            return KeyKind.PRIVATE
        if self.label == PUBLIC_KEY_LABEL:
            return KeyKind.PUBLIC
        return None

    def to_pem(self) -> bytes:
        """Render the block as PEM text, base64 wrapped at 64 columns."""
        encoded = b64e(self.body)
        lines = [f"-----BEGIN {self.label}-----"]
        lines.extend(
            encoded[i:i + PEM_LINE_LENGTH]
            for i in range(0, len(encoded), PEM_LINE_LENGTH)
        )
        lines.append(f"-----END {self.label}-----")
        return ("\n".join(lines) + "\n").encode("ascii")
