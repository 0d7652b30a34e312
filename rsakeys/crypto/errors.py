"""Exception types raised by the key codec."""

from typing import Optional


class RSAKeyError(Exception):
    """Base class for all key codec failures."""
    pass


class WrongKeyType(RSAKeyError):
    """Raised when a PEM label does not match the key kind being read."""
    pass


class WrongPrivateKeyType(WrongKeyType):
    """Raised when a private key read finds a label other than RSA PRIVATE KEY."""

    def __init__(self, label: Optional[str] = None):
        self.label = label
        super().__init__("key is not of type RSA PRIVATE KEY"
                         + (f" (found '{label}')" if label else ""))


class WrongPublicKeyType(WrongKeyType):
    """Raised when a public key read finds a label other than RSA PUBLIC KEY."""

    def __init__(self, label: Optional[str] = None):
        self.label = label
        super().__init__("key is not of type RSA PUBLIC KEY"
                         + (f" (found '{label}')" if label else ""))


class MalformedEnvelope(RSAKeyError):
    """Raised when the input holds no valid PEM block."""
    pass


class ParseFailure(RSAKeyError):
    """Raised when a key body fails every decode attempt."""
    pass


class KeyTypeMismatch(RSAKeyError):
    """Raised when a body parses into a valid key that is not RSA."""
    pass


class UnsupportedFormat(RSAKeyError):
    """Raised for a format tag that is unknown or does not fit the key kind."""
    pass


class EncodingFailure(RSAKeyError):
    """Raised when an in-memory key cannot be serialized."""
    pass
