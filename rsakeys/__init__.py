"""rsakeys: generate, store, load and re-encode RSA keys as PEM files."""

from .common.types import KeyKind, KeyFormat, PRIVATE_KEY_LABEL, PUBLIC_KEY_LABEL
from .crypto.errors import (
    RSAKeyError,
    WrongKeyType,
    WrongPrivateKeyType,
    WrongPublicKeyType,
    MalformedEnvelope,
    ParseFailure,
    KeyTypeMismatch,
    UnsupportedFormat,
    EncodingFailure,
)
from .keys import (
    generate_private_key,
    generate_private_key_pem,
    generate_and_write_private_key,
    generate_keypair,
    generate_pkcs1_keypair,
    generate_pkcs8_keypair,
    keypair_paths,
    encode_private_key,
    encode_public_key,
    write_private_key,
    write_public_key,
    load_private_key,
    load_public_key,
    read_private_key,
    read_public_key,
    read_private_key_as,
    read_public_key_as,
    read_private_pkcs1,
    read_private_pkcs8,
    read_public_pkcs1,
    read_public_pkix,
)

__all__ = [
    "KeyKind",
    "KeyFormat",
    "PRIVATE_KEY_LABEL",
    "PUBLIC_KEY_LABEL",
    "RSAKeyError",
    "WrongKeyType",
    "WrongPrivateKeyType",
    "WrongPublicKeyType",
    "MalformedEnvelope",
    "ParseFailure",
    "KeyTypeMismatch",
    "UnsupportedFormat",
    "EncodingFailure",
    "generate_private_key",
    "generate_private_key_pem",
    "generate_and_write_private_key",
    "generate_keypair",
    "generate_pkcs1_keypair",
    "generate_pkcs8_keypair",
    "keypair_paths",
    "encode_private_key",
    "encode_public_key",
    "write_private_key",
    "write_public_key",
    "load_private_key",
    "load_public_key",
    "read_private_key",
    "read_public_key",
    "read_private_key_as",
    "read_public_key_as",
    "read_private_pkcs1",
    "read_private_pkcs8",
    "read_public_pkcs1",
    "read_public_pkix",
]
