"""Security helpers: key derivation, cipher and salted containers for SaltedBox.

This package provides:
- the legacy single-round MD5 key/IV derivation (OpenSSL ``-md md5`` compatible)
- AES-128-CBC encryption with PKCS#7 padding
- ``Salted__`` container framing plus a versioned Argon2id container
- bytes, Base64 text and whole-file entry points
"""

from .kdf import generate_salt, derive_key_and_iv, derive_key_and_iv_argon2id
from .cipher import encrypt, decrypt
from .container import (
    HEADER,
    ARGON2ID_HEADER,
    ContainerParts,
    split_container,
    seal_container,
    open_container,
    seal_container_argon2id,
    open_container_argon2id,
)
from .encryption import (
    DecryptResult,
    encrypt_bytes,
    decrypt_bytes,
    try_decrypt_bytes,
    encrypt_string,
    decrypt_string,
    try_decrypt_string,
    encrypt_file,
    decrypt_file,
)

__all__ = [
    "generate_salt",
    "derive_key_and_iv",
    "derive_key_and_iv_argon2id",
    "encrypt",
    "decrypt",
    "HEADER",
    "ARGON2ID_HEADER",
    "ContainerParts",
    "split_container",
    "seal_container",
    "open_container",
    "seal_container_argon2id",
    "open_container_argon2id",
    "DecryptResult",
    "encrypt_bytes",
    "decrypt_bytes",
    "try_decrypt_bytes",
    "encrypt_string",
    "decrypt_string",
    "try_decrypt_string",
    "encrypt_file",
    "decrypt_file",
]
