"""PEM wrapping and label-checked unwrapping of RSA key blocks."""

import binascii
import logging
import re

from ..common.envelope import PEMEnvelope
from ..common.types import KeyKind, KeyFormat
from ..common.utils import b64d
from . import formats
from .errors import (
    EncodingFailure,
    MalformedEnvelope,
    WrongPrivateKeyType,
    WrongPublicKeyType,
)

logger = logging.getLogger(__name__)

_PEM_BLOCK = re.compile(
    rb"-----BEGIN ([^\r\n-]*)-----\r?\n"
    rb"(.*?)"
    rb"-----END ([^\r\n-]*)-----",
    re.DOTALL,
)


def wrap(block: bytes, kind: KeyKind) -> bytes:
    """
    Wrap a DER block in a PEM envelope labeled for the key kind.

    Args:
        block: DER bytes
        kind: key kind selecting the label

    Returns:
        PEM bytes
    """
    if not block:
        raise EncodingFailure("Cannot wrap an empty key block")
    return PEMEnvelope(label=kind.label, body=block).to_pem()


def _parse_block(match) -> PEMEnvelope:
    begin_label, body, end_label = match.groups()
    if begin_label != end_label:
        raise MalformedEnvelope(
            f"PEM BEGIN/END labels differ: '{begin_label.decode('ascii', 'replace')}'"
            f" vs '{end_label.decode('ascii', 'replace')}'"
        )

    # Encapsulated headers (e.g. Proc-Type) mean an encrypted body
    if b":" in body.split(b"\n", 1)[0]:
        raise MalformedEnvelope("PEM headers are not supported")

    try:
        label = begin_label.decode('ascii')
        der = b64d(body)
    except (binascii.Error, ValueError) as e:
        raise MalformedEnvelope(f"Invalid PEM body: {e}") from e

    if not der:
        raise MalformedEnvelope("PEM block has an empty body")
    return PEMEnvelope(label=label, body=der)


def unwrap(data: bytes) -> PEMEnvelope:
    """
    Extract the first valid PEM block from raw bytes.

    Text before the block is skipped, like the PEM decoders of OpenSSL.
    An invalid block is skipped too and scanning resumes after its
    BEGIN line.

    Raises:
        MalformedEnvelope if no valid PEM block is found
    """
    if isinstance(data, str):
        data = data.encode('utf-8')

    last_error = None
    pos = 0
    while True:
        match = _PEM_BLOCK.search(data, pos)
        if match is None:
            break
        try:
            return _parse_block(match)
        except MalformedEnvelope as e:
            logger.debug(f"Skipping invalid PEM block at offset {match.start()}: {e}")
            last_error = e
            pos = match.start() + 1

    if last_error is not None:
        raise last_error
    raise MalformedEnvelope("No PEM block found")


def unwrap_private(data: bytes) -> PEMEnvelope:
    """Unwrap a PEM block and require the RSA PRIVATE KEY label."""
    envelope = unwrap(data)
    if envelope.kind is not KeyKind.PRIVATE:
        raise WrongPrivateKeyType(envelope.label)
    return envelope


def unwrap_public(data: bytes) -> PEMEnvelope:
    """Unwrap a PEM block and require the RSA PUBLIC KEY label."""
    envelope = unwrap(data)
    if envelope.kind is not KeyKind.PUBLIC:
        raise WrongPublicKeyType(envelope.label)
    return envelope


def encode_private_pem(key, fmt: KeyFormat) -> bytes:
    """Encode a private key in fmt and wrap it as RSA PRIVATE KEY."""
    return wrap(formats.encode_private_key(key, fmt), KeyKind.PRIVATE)


def encode_public_pem(key, fmt: KeyFormat) -> bytes:
    """Encode a public key in fmt and wrap it as RSA PUBLIC KEY."""
    return wrap(formats.encode_public_key(key, fmt), KeyKind.PUBLIC)


def decode_private_pem(data: bytes):
    """
    Parse PEM bytes into an RSA private key.

    The label is checked before the body reaches any binary parser.

    Raises:
        MalformedEnvelope, WrongPrivateKeyType, ParseFailure, KeyTypeMismatch
    """
    envelope = unwrap_private(data)
    return formats.decode_private_key(envelope.body)


def decode_public_pem(data: bytes):
    """
    Parse PEM bytes into an RSA public key.

    Raises:
        MalformedEnvelope, WrongPublicKeyType, ParseFailure, KeyTypeMismatch
    """
    envelope = unwrap_public(data)
    return formats.decode_public_key(envelope.body)
