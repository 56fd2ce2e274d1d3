"""AES-128-CBC with PKCS#7 padding.

Ciphertext carries no metadata; key and IV always come from
:mod:`saltedbox.security.kdf`.
"""
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from saltedbox.core.exceptions import InvalidKeyMaterialError, PaddingError

BLOCK_SIZE = 16
KEY_SIZE = 16


def _check_key_material(key: bytes, iv: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise InvalidKeyMaterialError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    if len(iv) != BLOCK_SIZE:
        raise InvalidKeyMaterialError(f"iv must be {BLOCK_SIZE} bytes, got {len(iv)}")


def encrypt(plaintext: bytes, key: bytes, iv: bytes) -> bytes:
    _check_key_material(key, iv)

    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt(ciphertext: bytes, key: bytes, iv: bytes) -> bytes:
    """Decrypt and strip padding.

    Raises PaddingError if the ciphertext is not a positive multiple of the
    block size or the recovered padding is inconsistent, which is what a
    wrong password almost always looks like.
    """
    _check_key_material(key, iv)
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise PaddingError(
            f"ciphertext length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
        )

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise PaddingError("invalid padding (wrong password or corrupted data)") from e
