#!/usr/bin/env python3
"""
Encryption wrapper demonstration entry point.

This script wraps a plain object in an EncryptedProxy, writes a public and a
secret attribute through it and shows what the object actually stores next
to what the proxy reads back, once for each encoding mode.
"""

import argparse
import sys

from encryption_wrapper import (
    EncodingMode,
    EncryptedProxy,
    EncryptionWrapperError,
    WrapperConfig,
    default_provider,
)


class Demo:
    """Plain object with one public and one secret attribute."""

    def __init__(self) -> None:
        self.not_secret: str | None = None
        self.secret: str | None = None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Encryption wrapper demo")

    parser.add_argument(
        "--config",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--cipher",
        help="Cipher to use (default: from configuration)"
    )

    parser.add_argument(
        "--key",
        default="SECRET_KEY_6X2tjYipm4Wr8Sl0",
        help="Encryption key for the demo"
    )

    parser.add_argument(
        "--encoding",
        choices=[mode.value for mode in EncodingMode],
        help="Run only one encoding mode (default: both)"
    )

    parser.add_argument(
        "--list-ciphers",
        action="store_true",
        help="List the ciphers supported by the crypto provider and exit"
    )

    return parser.parse_args(argv)


def run_demo(cipher: str, key: str, mode: EncodingMode) -> None:
    """Write and read back both demo attributes in one encoding mode."""
    print(f"== {mode.value} ({cipher})")
    obj = Demo()
    proxy = EncryptedProxy(obj, key, cipher, {"encrypted": ["secret"], "encoding": mode})

    for field, data in (("not_secret", "public"), ("secret", "private")):
        proxy.set(field, f"some {data} data")
        print(f"  {field}")
        print(f"    stored: {getattr(obj, field)!r}")
        print(f"    read:   {proxy.get(field)!r}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the demo."""
    args = parse_args(argv)

    WrapperConfig.initialize(args.config)

    try:
        provider = default_provider()
        if args.list_ciphers:
            for name in sorted(provider.supported_ciphers()):
                print(name)
            return 0

        cipher = args.cipher or WrapperConfig.get_default_cipher()
        modes = [EncodingMode(args.encoding)] if args.encoding else list(EncodingMode)
        for mode in modes:
            run_demo(cipher, args.key, mode)
    except EncryptionWrapperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
