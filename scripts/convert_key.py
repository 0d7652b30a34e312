"""Re-encode an RSA PEM key file in another format."""

import os
import sys
import logging
import argparse
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rsakeys import KeyKind, KeyFormat, read_private_key_as, read_public_key_as
from rsakeys.common.config import LOG_LEVEL
from rsakeys.storage.keyfile import write_key_file


def convert(input_path: str, kind: KeyKind, fmt_name: str, output_path: Optional[str] = None) -> bytes:
    """
    Read a key file and re-encode it.

    Args:
        input_path: source PEM file
        kind: key kind expected in the source file
        fmt_name: target format, e.g. "pkcs8" or "pkix"
        output_path: optional destination; nothing is written when omitted

    Returns:
        re-encoded PEM bytes
    """
    fmt = KeyFormat.parse(fmt_name, kind)
    if kind is KeyKind.PRIVATE:
        data = read_private_key_as(input_path, fmt)
    else:
        data = read_public_key_as(input_path, fmt)

    if output_path:
        write_key_file(output_path, data, private=kind is KeyKind.PRIVATE)
    return data


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert an RSA PEM key between PKCS#1, PKCS#8 and PKIX"
    )
    parser.add_argument("input", help="Source key file")
    parser.add_argument(
        "--public",
        action="store_true",
        help="Source holds an RSA PUBLIC KEY (default: private key)"
    )
    parser.add_argument(
        "--to",
        required=True,
        help="Target format: pkcs1 or pkcs8 (private), pkcs1 or pkix (public)"
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Output path (default: print to stdout)"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s [%(levelname)s] %(message)s'
    )

    kind = KeyKind.PUBLIC if args.public else KeyKind.PRIVATE
    try:
        data = convert(args.input, kind, args.to, args.out)
    except Exception as e:
        print(f"[-] Error: {e}", file=sys.stderr)
        return 1

    if args.out:
        print(f"[+] Wrote {args.out}")
    else:
        sys.stdout.write(data.decode('ascii'))
    return 0


if __name__ == "__main__":
    sys.exit(main())
