"""
Public API: generate, persist, read and re-encode RSA keys.

Private keys are written with the RSA PRIVATE KEY label and public keys
with the RSA PUBLIC KEY label, whatever the binary encoding of the body.
"""

import os
import logging

from cryptography.hazmat.primitives.asymmetric import rsa

from .common.config import (
    DEFAULT_KEY_SIZE,
    PUBLIC_EXPONENT,
    PRIVATE_KEY_SUFFIX,
    PUBLIC_KEY_SUFFIX,
)
from .common.types import KeyFormat
from .crypto import pem
from .storage.keyfile import read_key_file, write_key_file

logger = logging.getLogger(__name__)


def generate_private_key(bits: int = DEFAULT_KEY_SIZE) -> rsa.RSAPrivateKey:
    """
    Generate an RSA private key.

    The bit size is passed through unchecked; errors from the generator
    (e.g. a size that is too small) propagate unchanged.
    """
    private_key = rsa.generate_private_key(
        public_exponent=PUBLIC_EXPONENT,
        key_size=bits
    )
    logger.info(f"Generated {bits}-bit RSA private key")
    return private_key


def generate_private_key_pem(bits: int = DEFAULT_KEY_SIZE,
                             fmt: KeyFormat = KeyFormat.PKCS1_PRIVATE) -> bytes:
    """Generate an RSA private key and return it as PEM bytes in fmt."""
    return pem.encode_private_pem(generate_private_key(bits), fmt)


def encode_private_key(private_key: rsa.RSAPrivateKey,
                       fmt: KeyFormat = KeyFormat.PKCS1_PRIVATE) -> bytes:
    """Return the PEM bytes of a private key in fmt."""
    return pem.encode_private_pem(private_key, fmt)


def encode_public_key(public_key: rsa.RSAPublicKey,
                      fmt: KeyFormat = KeyFormat.PKIX_PUBLIC) -> bytes:
    """Return the PEM bytes of a public key in fmt."""
    return pem.encode_public_pem(public_key, fmt)


def write_private_key(private_key: rsa.RSAPrivateKey, path: str,
                      fmt: KeyFormat = KeyFormat.PKCS1_PRIVATE) -> None:
    """
    Write a private key to path as a PEM file.

    The key is fully encoded before the file is created, so an encoding
    failure leaves nothing on disk.
    """
    data = pem.encode_private_pem(private_key, fmt)
    write_key_file(path, data, private=True)


def write_public_key(public_key: rsa.RSAPublicKey, path: str,
                     fmt: KeyFormat = KeyFormat.PKIX_PUBLIC) -> None:
    """Write a public key to path as a PEM file."""
    data = pem.encode_public_pem(public_key, fmt)
    write_key_file(path, data)


def generate_and_write_private_key(path: str, bits: int = DEFAULT_KEY_SIZE,
                                   fmt: KeyFormat = KeyFormat.PKCS1_PRIVATE) -> rsa.RSAPrivateKey:
    """
    Generate a private key, write it to path in fmt and return it.

    Returns:
        the generated key, so callers need not read the file back
    """
    private_key = generate_private_key(bits)
    write_private_key(private_key, path, fmt)
    return private_key


def keypair_paths(directory: str, keyname: str) -> tuple:
    """Return the (private, public) file paths used by generate_keypair."""
    return (
        os.path.join(directory, f"{keyname}.{PRIVATE_KEY_SUFFIX}"),
        os.path.join(directory, f"{keyname}.{PUBLIC_KEY_SUFFIX}"),
    )


def generate_keypair(directory: str, keyname: str, bits: int = DEFAULT_KEY_SIZE,
                     fmt: KeyFormat = KeyFormat.PKCS1_PRIVATE) -> rsa.RSAPrivateKey:
    """
    Generate a keypair and write both halves under directory.

    Writes <directory>/<keyname>.pem with the private key in fmt and
    <directory>/<keyname>.pub with the public key, always as PKIX.
    The directory is not created.

    Args:
        directory: existing output directory
        keyname: base file name
        bits: key size in bits
        fmt: private key format

    Returns:
        the generated private key
    """
    private_path, public_path = keypair_paths(directory, keyname)

    private_key = generate_private_key(bits)
    write_private_key(private_key, private_path, fmt)
    write_public_key(private_key.public_key(), public_path, KeyFormat.PKIX_PUBLIC)
    return private_key


def load_private_key(data: bytes) -> rsa.RSAPrivateKey:
    """Parse an RSA PRIVATE KEY PEM block held in memory."""
    return pem.decode_private_pem(data)


def load_public_key(data: bytes) -> rsa.RSAPublicKey:
    """Parse an RSA PUBLIC KEY PEM block held in memory."""
    return pem.decode_public_pem(data)


def read_private_key(path: str) -> rsa.RSAPrivateKey:
    """
    Read an RSA private key from a PEM file.

    Raises:
        FileNotFoundError / OSError if the file cannot be read
        MalformedEnvelope if it holds no PEM block
        WrongPrivateKeyType if the label is not RSA PRIVATE KEY
        ParseFailure if the body is neither PKCS#1 nor PKCS#8
        KeyTypeMismatch if the body is a non-RSA key
    """
    private_key = load_private_key(read_key_file(path))
    logger.info(f"Loaded private key from {path}")
    return private_key


def read_public_key(path: str) -> rsa.RSAPublicKey:
    """
    Read an RSA public key from a PEM file.

    Raises:
        FileNotFoundError / OSError if the file cannot be read
        MalformedEnvelope if it holds no PEM block
        WrongPublicKeyType if the label is not RSA PUBLIC KEY
        ParseFailure if the body is neither PKCS#1 nor PKIX
        KeyTypeMismatch if the body is a non-RSA key
    """
    public_key = load_public_key(read_key_file(path))
    logger.info(f"Loaded public key from {path}")
    return public_key


def read_private_key_as(path: str, fmt: KeyFormat) -> bytes:
    """Read a private key file and return it re-encoded as PEM in fmt."""
    return encode_private_key(read_private_key(path), fmt)


def read_public_key_as(path: str, fmt: KeyFormat) -> bytes:
    """Read a public key file and return it re-encoded as PEM in fmt."""
    return encode_public_key(read_public_key(path), fmt)


def read_private_pkcs1(path: str) -> bytes:
    return read_private_key_as(path, KeyFormat.PKCS1_PRIVATE)


def read_private_pkcs8(path: str) -> bytes:
    return read_private_key_as(path, KeyFormat.PKCS8_PRIVATE)


def read_public_pkcs1(path: str) -> bytes:
    return read_public_key_as(path, KeyFormat.PKCS1_PUBLIC)


def read_public_pkix(path: str) -> bytes:
    return read_public_key_as(path, KeyFormat.PKIX_PUBLIC)


def generate_pkcs1_keypair(directory: str, keyname: str,
                           bits: int = DEFAULT_KEY_SIZE) -> rsa.RSAPrivateKey:
    return generate_keypair(directory, keyname, bits, KeyFormat.PKCS1_PRIVATE)


def generate_pkcs8_keypair(directory: str, keyname: str,
                           bits: int = DEFAULT_KEY_SIZE) -> rsa.RSAPrivateKey:
    return generate_keypair(directory, keyname, bits, KeyFormat.PKCS8_PRIVATE)
