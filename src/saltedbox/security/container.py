"""Salted container framing.

Legacy layout (compatible with ``openssl enc -aes-128-cbc -md md5``):
- 8 bytes: magic b'Salted__'
- 8 bytes: salt
- N bytes: AES-128-CBC ciphertext, N a multiple of 16

Argon2id layout (versioned, not readable by openssl):
- 8 bytes: magic b'SaltedA2'
- 16 bytes: salt
- N bytes: AES-128-CBC ciphertext

The legacy reader only uses the first 8 bytes to find the salt and accepts
any prefix unless ``strict_header`` is set. The Argon2id reader always checks
its magic.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from saltedbox.core.exceptions import MalformedContainerError
from . import cipher
from .kdf import (
    ARGON2ID_SALT_LEN,
    SALT_LEN,
    derive_key_and_iv,
    derive_key_and_iv_argon2id,
    generate_salt,
)

HEADER = b"Salted__"
HEADER_LEN = len(HEADER)
MIN_CONTAINER_LEN = HEADER_LEN + SALT_LEN

ARGON2ID_HEADER = b"SaltedA2"
ARGON2ID_MIN_CONTAINER_LEN = len(ARGON2ID_HEADER) + ARGON2ID_SALT_LEN


@dataclass(frozen=True)
class ContainerParts:
    header: bytes
    salt: bytes
    ciphertext: bytes


def split_container(container: bytes, salt_len: int = SALT_LEN) -> ContainerParts:
    """Split ``header || salt || ciphertext`` without interpreting anything."""
    if len(container) < HEADER_LEN + salt_len:
        raise MalformedContainerError(
            f"container is {len(container)} bytes, need at least {HEADER_LEN + salt_len} for header and salt"
        )
    return ContainerParts(
        header=container[:HEADER_LEN],
        salt=container[HEADER_LEN:HEADER_LEN + salt_len],
        ciphertext=container[HEADER_LEN + salt_len:],
    )


def seal_container(plaintext: bytes, password: Union[bytes, str]) -> bytes:
    salt = generate_salt()
    key, iv = derive_key_and_iv(password, salt)
    ct = cipher.encrypt(plaintext, key, iv)

    out = bytearray()
    out += HEADER
    out += salt
    out += ct
    return bytes(out)


def open_container(container: bytes, password: Union[bytes, str], strict_header: bool = False) -> bytes:
    """
    Recover the plaintext of a legacy container.

    Raises MalformedContainerError for inputs shorter than header+salt (and
    for a foreign header when ``strict_header`` is set), PaddingError when the
    password is wrong or the ciphertext is damaged.
    """
    parts = split_container(container)
    if strict_header and parts.header != HEADER:
        raise MalformedContainerError("Invalid container format (header mismatch)")

    key, iv = derive_key_and_iv(password, parts.salt)
    return cipher.decrypt(parts.ciphertext, key, iv)


def seal_container_argon2id(
    plaintext: bytes,
    password: Union[bytes, str],
    time_cost: int = 3,
    memory_cost: int = 65536,
    parallelism: int = 1,
) -> bytes:
    salt = generate_salt(ARGON2ID_SALT_LEN)
    key, iv = derive_key_and_iv_argon2id(
        password,
        salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
    )
    ct = cipher.encrypt(plaintext, key, iv)

    out = bytearray()
    out += ARGON2ID_HEADER
    out += salt
    out += ct
    return bytes(out)


def open_container_argon2id(
    container: bytes,
    password: Union[bytes, str],
    time_cost: int = 3,
    memory_cost: int = 65536,
    parallelism: int = 1,
) -> bytes:
    # cost parameters are not stored in the container; both sides must agree
    parts = split_container(container, salt_len=ARGON2ID_SALT_LEN)
    if parts.header != ARGON2ID_HEADER:
        raise MalformedContainerError("Invalid container format (expected Argon2id header)")

    key, iv = derive_key_and_iv_argon2id(
        password,
        parts.salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
    )
    return cipher.decrypt(parts.ciphertext, key, iv)
