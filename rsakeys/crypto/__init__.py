"""Key codec: DER formats, PEM envelopes and error types."""

from .errors import (
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
from .formats import (
    encode_key,
    encode_private_key,
    encode_public_key,
    decode_as,
    decode_key,
    decode_private_key,
    decode_public_key,
    PRIVATE_DECODE_ORDER,
    PUBLIC_DECODE_ORDER,
)
from .pem import (
    wrap,
    unwrap,
    unwrap_private,
    unwrap_public,
    encode_private_pem,
    encode_public_pem,
    decode_private_pem,
    decode_public_pem,
)

__all__ = [
    "RSAKeyError",
    "WrongKeyType",
    "WrongPrivateKeyType",
    "WrongPublicKeyType",
    "MalformedEnvelope",
    "ParseFailure",
    "KeyTypeMismatch",
    "UnsupportedFormat",
    "EncodingFailure",
    "encode_key",
    "encode_private_key",
    "encode_public_key",
    "decode_as",
    "decode_key",
    "decode_private_key",
    "decode_public_key",
    "PRIVATE_DECODE_ORDER",
    "PUBLIC_DECODE_ORDER",
    "wrap",
    "unwrap",
    "unwrap_private",
    "unwrap_public",
    "encode_private_pem",
    "encode_public_pem",
    "decode_private_pem",
    "decode_public_pem",
]
