"""Storage layer: bounded key file I/O."""

from .keyfile import read_key_file, write_key_file

__all__ = [
    "read_key_file",
    "write_key_file",
]
