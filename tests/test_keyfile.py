"""
Bounded key file I/O tests.

Covers:
1. Files at and just past the 10 KiB ceiling
2. Byte-exact truncation
3. Errors from open() surface unchanged
4. Private files get 0o600
"""

import logging
import os
import stat
import sys

import pytest

from rsakeys import KeyFormat, MalformedEnvelope, read_private_key
from rsakeys.common.config import MAX_KEY_FILE_SIZE
from rsakeys.crypto import pem
from rsakeys.storage import read_key_file, write_key_file
from conftest import same_private


def _padded(data: bytes, size: int) -> bytes:
    return data + b"\n" * (size - len(data))


def test_ceiling_is_ten_kib():
    assert MAX_KEY_FILE_SIZE == 10 * 1024


def test_file_at_ceiling_decodes(rsa_key, tmp_path):
    path = tmp_path / "exact.pem"
    path.write_bytes(_padded(pem.encode_private_pem(rsa_key, KeyFormat.PKCS8_PRIVATE), MAX_KEY_FILE_SIZE))

    assert len(read_key_file(str(path))) == MAX_KEY_FILE_SIZE
    assert same_private(read_private_key(str(path)), rsa_key)


def test_file_past_ceiling_with_envelope_inside_decodes(rsa_key, tmp_path, caplog):
    path = tmp_path / "over.pem"
    path.write_bytes(_padded(pem.encode_private_pem(rsa_key, KeyFormat.PKCS1_PRIVATE), MAX_KEY_FILE_SIZE + 1))

    with caplog.at_level(logging.WARNING, logger="rsakeys.storage.keyfile"):
        content = read_key_file(str(path))
    assert len(content) == MAX_KEY_FILE_SIZE
    assert "exceeds" in caplog.text
    assert same_private(read_private_key(str(path)), rsa_key)


def test_envelope_cut_by_ceiling_is_malformed(rsa_key, tmp_path):
    data = pem.encode_private_pem(rsa_key, KeyFormat.PKCS1_PRIVATE)
    path = tmp_path / "cut.pem"
    path.write_bytes(b"#" * (MAX_KEY_FILE_SIZE - len(data) // 2) + data)

    with pytest.raises(MalformedEnvelope):
        read_private_key(str(path))


def test_custom_limit_truncates_byte_exact(tmp_path):
    path = tmp_path / "blob"
    path.write_bytes(b"0123456789")
    assert read_key_file(str(path), limit=4) == b"0123"


def test_missing_file_raises_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_key_file(str(tmp_path / "absent.pem"))


def test_write_truncates_existing_file(tmp_path):
    path = tmp_path / "key.pub"
    path.write_bytes(b"x" * 100)
    write_key_file(str(path), b"short")
    assert path.read_bytes() == b"short"


def test_write_does_not_create_directories(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_key_file(str(tmp_path / "missing" / "key.pem"), b"data")


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
def test_private_file_mode(tmp_path):
    path = tmp_path / "key.pem"
    write_key_file(str(path), b"data", private=True)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
def test_private_file_created_owner_only(tmp_path, monkeypatch):
    path = tmp_path / "fresh.pem"
    monkeypatch.setattr(os, "chmod", lambda *args, **kwargs: None)
    write_key_file(str(path), b"data", private=True)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
    assert path.read_bytes() == b"data"


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
def test_existing_private_file_is_restricted(tmp_path):
    path = tmp_path / "old.pem"
    path.write_bytes(b"previous contents")
    os.chmod(path, 0o644)
    write_key_file(str(path), b"new", private=True)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
    assert path.read_bytes() == b"new"
