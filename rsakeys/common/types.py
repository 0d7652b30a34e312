"""Key kinds, encoding formats and the fixed PEM labels."""

from enum import Enum
from typing import Optional

PRIVATE_KEY_LABEL = "RSA PRIVATE KEY"
PUBLIC_KEY_LABEL = "RSA PUBLIC KEY"


class KeyKind(Enum):
    """Whether key material is the private or the public half."""
    PRIVATE = "private"
    PUBLIC = "public"

    @property
    def label(self) -> str:
        """PEM label used for every encoding of this kind."""
        if self is KeyKind.PRIVATE:
            return PRIVATE_KEY_LABEL
        return PUBLIC_KEY_LABEL


class KeyFormat(Enum):
    """Binary encodings supported by the codec."""
    PKCS1_PRIVATE = "pkcs1-private"
    PKCS8_PRIVATE = "pkcs8-private"
    PKCS1_PUBLIC = "pkcs1-public"
    PKIX_PUBLIC = "pkix-public"

    @property
    def kind(self) -> KeyKind:
        if self in (KeyFormat.PKCS1_PRIVATE, KeyFormat.PKCS8_PRIVATE):
            return KeyKind.PRIVATE
        return KeyKind.PUBLIC

    @classmethod
    def parse(cls, name: str, kind: Optional[KeyKind] = None) -> "KeyFormat":
        """
        Resolve a format from a user-facing name.

        Accepts full values ("pkcs8-private") or, when kind is given,
        short names ("pkcs1", "pkcs8", "pkix").

        Raises:
            ValueError if the name does not match a format
        """
        name = name.strip().lower()
        if kind is not None and "-" not in name:
            name = f"{name}-{kind.value}"
        try:
            fmt = cls(name)
        except ValueError:
            raise ValueError(f"Unknown key format: {name}")
        if kind is not None and fmt.kind is not kind:
            raise ValueError(f"{fmt.value} is not a {kind.value} key format")
        return fmt
