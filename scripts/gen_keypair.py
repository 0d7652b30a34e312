"""Generate an RSA keypair as <dir>/<name>.pem and <dir>/<name>.pub."""

import os
import sys
import logging
import argparse

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rsakeys import KeyKind, KeyFormat, generate_keypair, keypair_paths
from rsakeys.common.config import DEFAULT_KEY_SIZE, LOG_LEVEL
from rsakeys.common.utils import sha256_hex
from rsakeys.crypto.formats import encode_public_key


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate an RSA keypair (private .pem + PKIX public .pub)"
    )
    parser.add_argument(
        "--dir",
        default="keys",
        help="Existing output directory (default: keys)"
    )
    parser.add_argument(
        "--name",
        default="id_rsa",
        help="Base file name for the keypair (default: id_rsa)"
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=DEFAULT_KEY_SIZE,
        help=f"Key size in bits (default: {DEFAULT_KEY_SIZE})"
    )
    parser.add_argument(
        "--format",
        default="pkcs1",
        choices=["pkcs1", "pkcs8"],
        help="Private key encoding (default: pkcs1)"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s [%(levelname)s] %(message)s'
    )

    try:
        fmt = KeyFormat.parse(args.format, KeyKind.PRIVATE)
        print(f"[*] Generating {args.bits}-bit RSA keypair ({fmt.value})...")
        private_key = generate_keypair(args.dir, args.name, args.bits, fmt)
    except Exception as e:
        print(f"[-] Error: {e}", file=sys.stderr)
        return 1

    private_path, public_path = keypair_paths(args.dir, args.name)
    fingerprint = sha256_hex(encode_public_key(private_key.public_key(), KeyFormat.PKIX_PUBLIC))
    print("[+] Keypair created successfully!")
    print(f"    Private Key: {private_path}")
    print(f"    Public Key:  {public_path}")
    print(f"    SHA-256:     {fingerprint}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
