"""Key derivation for SaltedBox containers.

The legacy scheme is a single round of MD5 per output:

    key = MD5(password || salt)
    iv  = MD5(key || password || salt)

For AES-128 this matches OpenSSL's ``EVP_BytesToKey`` with MD5 and an
iteration count of one, i.e. ``openssl enc -aes-128-cbc -md md5``. It has no
work factor and is kept only so existing containers stay readable.
The Argon2id variant is a separate, versioned path.
"""
import os
from typing import Tuple, Union

from argon2.low_level import Type, hash_secret_raw

from saltedbox.core.hashing import ensure_md5_available, md5_digest

SALT_LEN = 8
KEY_LEN = 16
IV_LEN = 16
ARGON2ID_SALT_LEN = 16

ensure_md5_available()


def _password_bytes(password: Union[bytes, str]) -> bytes:
    if isinstance(password, str):
        password = password.encode("utf-8")
    return password


def generate_salt(length: int = SALT_LEN) -> bytes:
    """Return a cryptographically secure random salt."""
    return os.urandom(length)


def derive_key_and_iv(password: Union[bytes, str], salt: bytes) -> Tuple[bytes, bytes]:
    """
    Derive the AES-128 key and CBC IV for a legacy container.
    Returns (key, iv), 16 bytes each.
    """
    if len(salt) != SALT_LEN:
        raise ValueError(f"salt must be {SALT_LEN} bytes, got {len(salt)}")
    password = _password_bytes(password)

    key = md5_digest(password, salt)
    iv = md5_digest(key, password, salt)
    return key, iv


def derive_key_and_iv_argon2id(
    password: Union[bytes, str],
    salt: bytes,
    time_cost: int = 3,
    memory_cost: int = 65536,
    parallelism: int = 1,
) -> Tuple[bytes, bytes]:
    """
    Derive key and IV for the Argon2id container from one 32-byte output.
    The first half is the key, the second half the IV.
    """
    raw = hash_secret_raw(
        secret=_password_bytes(password),
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=KEY_LEN + IV_LEN,
        type=Type.ID,
    )
    return raw[:KEY_LEN], raw[KEY_LEN:]

