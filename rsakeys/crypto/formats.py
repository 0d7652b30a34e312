"""
DER encoders and decoders for RSA keys.

Private keys: PKCS#1 (RSAPrivateKey) and PKCS#8 (PrivateKeyInfo).
Public keys: PKCS#1 (RSAPublicKey) and PKIX (SubjectPublicKeyInfo).

Decoding without a format tag tries the formats of a key kind in a fixed
order, PKCS#1 first. Files written by older tooling rely on that order.
"""

import logging
from typing import Callable, Tuple, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from pyasn1.codec.der import decoder
from pyasn1.error import PyAsn1Error
from pyasn1_modules import rfc2437, rfc5208, rfc5280

from ..common.types import KeyKind, KeyFormat
from .errors import EncodingFailure, KeyTypeMismatch, ParseFailure, UnsupportedFormat

logger = logging.getLogger(__name__)

RSAKey = Union[rsa.RSAPrivateKey, rsa.RSAPublicKey]

_PRIVATE_FORMATS = {
    KeyFormat.PKCS1_PRIVATE: serialization.PrivateFormat.TraditionalOpenSSL,
    KeyFormat.PKCS8_PRIVATE: serialization.PrivateFormat.PKCS8,
}

_PUBLIC_FORMATS = {
    KeyFormat.PKCS1_PUBLIC: serialization.PublicFormat.PKCS1,
    KeyFormat.PKIX_PUBLIC: serialization.PublicFormat.SubjectPublicKeyInfo,
}


def encode_private_key(key: rsa.RSAPrivateKey, fmt: KeyFormat) -> bytes:
    """
    Serialize an RSA private key to DER.

    Args:
        key: RSA private key
        fmt: KeyFormat.PKCS1_PRIVATE or KeyFormat.PKCS8_PRIVATE

    Returns:
        DER bytes

    Raises:
        UnsupportedFormat if fmt is not a private key format
        EncodingFailure if the key cannot be serialized
    """
    if fmt not in _PRIVATE_FORMATS:
        raise UnsupportedFormat(f"Not a private key format: {fmt}")
    if not isinstance(key, rsa.RSAPrivateKey):
        raise EncodingFailure(f"Expected an RSA private key, got {type(key).__name__}")

    try:
        block = key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=_PRIVATE_FORMATS[fmt],
            encryption_algorithm=serialization.NoEncryption()
        )
    except (ValueError, TypeError) as e:
        raise EncodingFailure(f"Failed to encode private key as {fmt.value}: {e}") from e

    if not block:
        raise EncodingFailure(f"Encoding private key as {fmt.value} produced no data")
    return block


def encode_public_key(key: rsa.RSAPublicKey, fmt: KeyFormat) -> bytes:
    """
    Serialize an RSA public key to DER.

    Args:
        key: RSA public key
        fmt: KeyFormat.PKCS1_PUBLIC or KeyFormat.PKIX_PUBLIC

    Returns:
        DER bytes

    Raises:
        UnsupportedFormat if fmt is not a public key format
        EncodingFailure if the key cannot be serialized
    """
    if fmt not in _PUBLIC_FORMATS:
        raise UnsupportedFormat(f"Not a public key format: {fmt}")
    if not isinstance(key, rsa.RSAPublicKey):
        raise EncodingFailure(f"Expected an RSA public key, got {type(key).__name__}")

    try:
        block = key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=_PUBLIC_FORMATS[fmt]
        )
    except (ValueError, TypeError) as e:
        raise EncodingFailure(f"Failed to encode public key as {fmt.value}: {e}") from e

    if not block:
        raise EncodingFailure(f"Encoding public key as {fmt.value} produced no data")
    return block


def encode_key(key: RSAKey, fmt: KeyFormat) -> bytes:
    """Serialize a private or public key, dispatching on the format's kind."""
    if not isinstance(fmt, KeyFormat):
        raise UnsupportedFormat(f"Unknown key format: {fmt!r}")
    if fmt.kind is KeyKind.PRIVATE:
        return encode_private_key(key, fmt)
    return encode_public_key(key, fmt)


def _decode_structure(data: bytes, asn1_spec, name: str):
    """DER-decode data against an ASN.1 spec, rejecting trailing bytes."""
    try:
        record, rest = decoder.decode(data, asn1Spec=asn1_spec)
    except PyAsn1Error as e:
        raise ParseFailure(f"Not a {name} structure: {e}") from e
    if rest:
        raise ParseFailure(f"{len(rest)} trailing bytes after {name} structure")
    return record


def _parse_pkcs1_private(data: bytes) -> rsa.RSAPrivateKey:
    record = _decode_structure(data, rfc2437.RSAPrivateKey(), "PKCS#1 RSAPrivateKey")
    try:
        if int(record['version']) != 0:
            raise ParseFailure("Multi-prime PKCS#1 private keys are not supported")

        public_numbers = rsa.RSAPublicNumbers(
            e=int(record['publicExponent']),
            n=int(record['modulus'])
        )
        numbers = rsa.RSAPrivateNumbers(
            p=int(record['prime1']),
            q=int(record['prime2']),
            d=int(record['privateExponent']),
            dmp1=int(record['exponent1']),
            dmq1=int(record['exponent2']),
            iqmp=int(record['coefficient']),
            public_numbers=public_numbers
        )
        return numbers.private_key()
    except (PyAsn1Error, ValueError) as e:
        raise ParseFailure(f"Invalid PKCS#1 private key: {e}") from e


def _parse_pkcs8_private(data: bytes) -> rsa.RSAPrivateKey:
    _decode_structure(data, rfc5208.PrivateKeyInfo(), "PKCS#8 PrivateKeyInfo")
    try:
        key = serialization.load_der_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ParseFailure(f"Invalid PKCS#8 private key: {e}") from e

    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyTypeMismatch(
            f"PKCS#8 body holds a {type(key).__name__}, not an RSA private key"
        )
    return key


def _parse_pkcs1_public(data: bytes) -> rsa.RSAPublicKey:
    record = _decode_structure(data, rfc2437.RSAPublicKey(), "PKCS#1 RSAPublicKey")
    try:
        numbers = rsa.RSAPublicNumbers(
            e=int(record['publicExponent']),
            n=int(record['modulus'])
        )
        return numbers.public_key()
    except (PyAsn1Error, ValueError) as e:
        raise ParseFailure(f"Invalid PKCS#1 public key: {e}") from e


def _parse_pkix_public(data: bytes) -> rsa.RSAPublicKey:
    _decode_structure(data, rfc5280.SubjectPublicKeyInfo(), "PKIX SubjectPublicKeyInfo")
    try:
        key = serialization.load_der_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ParseFailure(f"Invalid PKIX public key: {e}") from e

    if not isinstance(key, rsa.RSAPublicKey):
        raise KeyTypeMismatch(
            f"PKIX body holds a {type(key).__name__}, not an RSA public key"
        )
    return key


Decoder = Callable[[bytes], RSAKey]

# Order matters: first successful parse wins.
PRIVATE_DECODE_ORDER: Tuple[Tuple[KeyFormat, Decoder], ...] = (
    (KeyFormat.PKCS1_PRIVATE, _parse_pkcs1_private),
    (KeyFormat.PKCS8_PRIVATE, _parse_pkcs8_private),
)

PUBLIC_DECODE_ORDER: Tuple[Tuple[KeyFormat, Decoder], ...] = (
    (KeyFormat.PKCS1_PUBLIC, _parse_pkcs1_public),
    (KeyFormat.PKIX_PUBLIC, _parse_pkix_public),
)

_DECODERS = dict(PRIVATE_DECODE_ORDER + PUBLIC_DECODE_ORDER)


def decode_as(data: bytes, fmt: KeyFormat) -> RSAKey:
    """
    Parse DER bytes as exactly one format, with no fallback.

    Raises:
        UnsupportedFormat if fmt is not a KeyFormat
        ParseFailure if the bytes are not a valid key in that format
        KeyTypeMismatch if the bytes hold a non-RSA key
    """
    if not isinstance(fmt, KeyFormat):
        raise UnsupportedFormat(f"Unknown key format: {fmt!r}")
    return _DECODERS[fmt](data)


def decode_key(data: bytes, kind: KeyKind) -> Tuple[RSAKey, KeyFormat]:
    """
    Parse DER bytes as a key of the given kind, trying each format in order.

    Args:
        data: DER bytes
        kind: KeyKind.PRIVATE or KeyKind.PUBLIC

    Returns:
        (key, format that parsed it)

    Raises:
        ParseFailure if every format fails, chained to the last failure
        KeyTypeMismatch if the bytes hold a valid key that is not RSA
    """
    if kind is KeyKind.PRIVATE:
        attempts = PRIVATE_DECODE_ORDER
    elif kind is KeyKind.PUBLIC:
        attempts = PUBLIC_DECODE_ORDER
    else:
        raise UnsupportedFormat(f"Unknown key kind: {kind!r}")

    last_error = None
    for fmt, parse in attempts:
        try:
            key = parse(data)
        except ParseFailure as e:
            logger.debug(f"{fmt.value} decode failed: {e}")
            last_error = e
            continue
        logger.debug(f"Decoded {kind.value} key as {fmt.value}")
        return key, fmt

    raise ParseFailure(f"Unable to parse the given {kind.value} key") from last_error


def decode_private_key(data: bytes) -> rsa.RSAPrivateKey:
    """Parse DER bytes as an RSA private key (PKCS#1, then PKCS#8)."""
    key, _ = decode_key(data, KeyKind.PRIVATE)
    return key


def decode_public_key(data: bytes) -> rsa.RSAPublicKey:
    """Parse DER bytes as an RSA public key (PKCS#1, then PKIX)."""
    key, _ = decode_key(data, KeyKind.PUBLIC)
    return key
