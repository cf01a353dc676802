"""Command that shows an RSA round trip on a small fixed key."""

from __future__ import annotations

import argparse
import sys

from .rsa import RSA


def main(argv: list[str] | None = None) -> int:
    """Encrypt and decrypt a sample message; return 0 when it survives the round trip."""
    parser = argparse.ArgumentParser(
        prog="cipherplay", description="Run an RSA round trip on a small key."
    )
    parser.parse_args(argv)

    message = 2
    cipher = RSA(14, 5, 11)

    ciphertext = cipher.encrypt(message)
    print(f"CIPHERTEXT: {ciphertext}")

    decrypted = cipher.decrypt(ciphertext)
    print(f"DECRYPTED: {decrypted}")

    if decrypted != message:
        print(f"decryption gave {decrypted}, expected {message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())