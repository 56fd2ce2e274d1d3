"""
Public encryption API for SaltedBox.

Three entry shapes sit on top of :mod:`saltedbox.security.container`:

- raw bytes in, raw container bytes out (:func:`encrypt_bytes` / :func:`decrypt_bytes`)
- UTF-8 text in, Base64 text out (:func:`encrypt_string` / :func:`decrypt_string`)
- whole files (:func:`encrypt_file` / :func:`decrypt_file`)

Failures are raised as the typed errors in :mod:`saltedbox.core.exceptions`.
Callers that would rather branch on a wrong password than catch it can use
:func:`try_decrypt_bytes` / :func:`try_decrypt_string`.
"""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from saltedbox.core.exceptions import MalformedContainerError, SaltedBoxError
from saltedbox.core.fileio import PathLike, read_file_bytes, write_file_bytes

from .container import open_container, seal_container

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DecryptResult(Generic[T]):
    """Outcome of a decrypt: either ``plaintext`` or ``error`` is set."""

    plaintext: Optional[T] = None
    error: Optional[SaltedBoxError] = None

    def __post_init__(self) -> None:
        if (self.plaintext is None) == (self.error is None):
            raise ValueError("DecryptResult needs exactly one of plaintext or error")

    @property
    def ok(self) -> bool:
        return self.error is None


# ----------------------------------------------------------------------
# Bytes
# ----------------------------------------------------------------------

def encrypt_bytes(plaintext: bytes, password: str) -> bytes:
    """
    Encrypt ``plaintext`` and return a ``Salted__`` container.

    A fresh random salt is drawn on every call, so encrypting the same input
    twice gives different output.
    """
    return seal_container(plaintext, password)


def decrypt_bytes(container: bytes, password: str, strict_header: bool = False) -> bytes:
    """
    Decrypt a container produced by :func:`encrypt_bytes` (or by
    ``openssl enc -aes-128-cbc -md md5``).
    """
    return open_container(container, password, strict_header=strict_header)


def try_decrypt_bytes(container: bytes, password: str, strict_header: bool = False) -> DecryptResult[bytes]:
    try:
        return DecryptResult(plaintext=decrypt_bytes(container, password, strict_header=strict_header))
    except SaltedBoxError as e:
        return DecryptResult(error=e)


# ----------------------------------------------------------------------
# Text
# ----------------------------------------------------------------------

def encrypt_string(plaintext: str, password: str) -> str:
    """Encrypt UTF-8 text and return the container as Base64 text."""
    container = encrypt_bytes(plaintext.encode("utf-8"), password)
    return base64.b64encode(container).decode("ascii")


def decrypt_string(encoded: str, password: str, strict_header: bool = False) -> str:
    """
    Inverse of :func:`encrypt_string`.

    Invalid Base64 (including non-ASCII input) and a plaintext that is not
    valid UTF-8 both raise MalformedContainerError.
    """
    try:
        container = base64.b64decode(encoded.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedContainerError(f"input is not valid Base64: {e}") from e

    plaintext = decrypt_bytes(container, password, strict_header=strict_header)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedContainerError(f"decrypted data is not UTF-8 text: {e}") from e


def try_decrypt_string(encoded: str, password: str, strict_header: bool = False) -> DecryptResult[str]:
    try:
        return DecryptResult(plaintext=decrypt_string(encoded, password, strict_header=strict_header))
    except SaltedBoxError as e:
        return DecryptResult(error=e)


# ----------------------------------------------------------------------
# Files
# ----------------------------------------------------------------------

def encrypt_file(input_path: PathLike, output_path: PathLike, password: str) -> int:
    """
    Encrypt a whole file into ``output_path``. Returns bytes written.

    I/O errors from reading or writing propagate unchanged.
    """
    data = read_file_bytes(input_path)
    size = write_file_bytes(output_path, encrypt_bytes(data, password))
    logger.debug("encrypted %s (%d bytes) -> %s (%d bytes)", input_path, len(data), output_path, size)
    return size


def decrypt_file(input_path: PathLike, output_path: PathLike, password: str, strict_header: bool = False) -> int:
    """
    Decrypt a whole container file into ``output_path``. Returns bytes written.

    The output file is only written once decryption has succeeded.
    """
    data = read_file_bytes(input_path)
    plaintext = decrypt_bytes(data, password, strict_header=strict_header)
    size = write_file_bytes(output_path, plaintext)
    logger.debug("decrypted %s (%d bytes) -> %s (%d bytes)", input_path, len(data), output_path, size)
    return size
