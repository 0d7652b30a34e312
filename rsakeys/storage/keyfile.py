"""Bounded key file reads and scoped key file writes."""

import os
import logging

from ..common.config import MAX_KEY_FILE_SIZE

logger = logging.getLogger(__name__)

PRIVATE_FILE_MODE = 0o600


def read_key_file(path: str, limit: int = MAX_KEY_FILE_SIZE) -> bytes:
    """
    Read at most `limit` bytes from a key file.

    Anything past the limit is dropped, so an oversized file yields a
    truncated (and usually unparseable) PEM block rather than an error.

    Args:
        path: key file path
        limit: byte ceiling (default 10 KiB)

    Returns:
        file contents, truncated to the ceiling

    Raises:
        FileNotFoundError / OSError from open or read
    """
    with open(path, 'rb') as f:
        content = f.read(limit + 1)

    if len(content) > limit:
        logger.warning(f"Key file {path} exceeds {limit} bytes, reading the first {limit} only")
        content = content[:limit]

    logger.debug(f"Read {len(content)} bytes from {path}")
    return content


def write_key_file(path: str, data: bytes, private: bool = False) -> None:
    """
    Create or truncate `path` and write the full key data.

    The parent directory must already exist. Private key files are
    restricted to owner read/write.

    Args:
        path: destination path
        data: complete PEM bytes
        private: restrict permissions to 0o600

    Raises:
        OSError from create or write
    """
    if private:
        # Created owner-only; chmod covers a file that already existed
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PRIVATE_FILE_MODE)
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.chmod(path, PRIVATE_FILE_MODE)
    else:
        with open(path, 'wb') as f:
            f.write(data)

    logger.info(f"Wrote {'private' if private else 'public'} key to {path}")
