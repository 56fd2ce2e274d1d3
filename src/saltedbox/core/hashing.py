""" Digest helpers backed by the cryptography hash primitives. """

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from .exceptions import InitializationError


def ensure_md5_available() -> None:

    # FIPS builds of OpenSSL refuse MD5; fail loudly instead of later.

    try:
        hashes.Hash(hashes.MD5())
    except UnsupportedAlgorithm as e:
        raise InitializationError(f"MD5 is not available from the crypto backend: {e}") from e


def md5_digest(*parts: bytes) -> bytes:

    # MD5 over the concatenation of parts; 16 bytes.

    h = hashes.Hash(hashes.MD5())
    for part in parts:
        h.update(part)
    return h.finalize()
