"""
Command line front end for SaltedBox.

Encrypt or decrypt whole files and short strings with a password:

    saltedbox encrypt-file secrets.yml secrets.yml.enc
    saltedbox decrypt-file secrets.yml.enc secrets.yml
    saltedbox encrypt-string "hello, world" --copy
    saltedbox decrypt-string U2FsdGVkX1...

The password comes from ``--password``, the ``SALTEDBOX_PASSWORD``
environment variable, or an interactive prompt, in that order.
Files are interchangeable with ``openssl enc -aes-128-cbc -md md5``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pyperclip

from saltedbox.core.exceptions import MalformedContainerError, PaddingError
from saltedbox.security.encryption import (
    decrypt_file,
    decrypt_string,
    encrypt_file,
    encrypt_string,
)
from .context import resolve_password
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WRONG_PASSWORD = 1
EXIT_MALFORMED = 2
EXIT_IO_ERROR = 3


def _cmd_encrypt_file(args: argparse.Namespace) -> int:
    password = resolve_password(args.password, confirm=True)
    size = encrypt_file(args.input, args.output, password)
    logger.info("Wrote %d bytes to %s", size, args.output)
    return EXIT_OK


def _cmd_decrypt_file(args: argparse.Namespace) -> int:
    password = resolve_password(args.password)
    size = decrypt_file(args.input, args.output, password, strict_header=args.strict_header)
    logger.info("Wrote %d bytes to %s", size, args.output)
    return EXIT_OK


def _cmd_encrypt_string(args: argparse.Namespace) -> int:
    password = resolve_password(args.password, confirm=True)
    encoded = encrypt_string(args.text, password)
    print(encoded)
    if args.copy:
        try:
            pyperclip.copy(encoded)
            logger.info("Copied to clipboard")
        except pyperclip.PyperclipException as e:
            logger.warning("Could not copy to clipboard: %s", e)
    return EXIT_OK


def _cmd_decrypt_string(args: argparse.Namespace) -> int:
    password = resolve_password(args.password)
    print(decrypt_string(args.text, password, strict_header=args.strict_header))
    return EXIT_OK


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saltedbox",
        description="Password-based AES-128-CBC encryption in the OpenSSL 'Salted__' format.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def _password_option(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--password",
            default=None,
            help="Password (default: $SALTEDBOX_PASSWORD, else prompt)",
        )

    def _strict_option(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--strict-header",
            action="store_true",
            help="Reject containers that do not start with 'Salted__'",
        )

    enc_file = subparsers.add_parser("encrypt-file", help="Encrypt a whole file")
    enc_file.add_argument("input", type=Path, help="Plaintext file to read")
    enc_file.add_argument("output", type=Path, help="Container file to write")
    _password_option(enc_file)
    enc_file.set_defaults(func=_cmd_encrypt_file)

    dec_file = subparsers.add_parser("decrypt-file", help="Decrypt a whole container file")
    dec_file.add_argument("input", type=Path, help="Container file to read")
    dec_file.add_argument("output", type=Path, help="Plaintext file to write")
    _password_option(dec_file)
    _strict_option(dec_file)
    dec_file.set_defaults(func=_cmd_decrypt_file)

    enc_str = subparsers.add_parser("encrypt-string", help="Encrypt text to Base64")
    enc_str.add_argument("text", help="UTF-8 text to encrypt")
    _password_option(enc_str)
    enc_str.add_argument(
        "--copy",
        action="store_true",
        help="Also copy the Base64 result to the clipboard",
    )
    enc_str.set_defaults(func=_cmd_encrypt_string)

    dec_str = subparsers.add_parser("decrypt-string", help="Decrypt Base64 text")
    dec_str.add_argument("text", help="Base64 container produced by encrypt-string")
    _password_option(dec_str)
    _strict_option(dec_str)
    dec_str.set_defaults(func=_cmd_decrypt_string)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        return args.func(args)
    except PaddingError as e:
        logger.error("Decryption failed, wrong password or corrupted data: %s", e)
        return EXIT_WRONG_PASSWORD
    except MalformedContainerError as e:
        logger.error("Not a valid container: %s", e)
        return EXIT_MALFORMED
    except ValueError as e:
        # password confirmation mismatch
        logger.error("%s", e)
        return EXIT_MALFORMED
    except OSError as e:
        logger.error("I/O error: %s", e)
        return EXIT_IO_ERROR


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover - CLI entry
    run()
