"""Unit tests for digest helpers."""

import hashlib
from unittest.mock import patch

import pytest
from cryptography.exceptions import UnsupportedAlgorithm

from saltedbox.core import hashing
from saltedbox.core.exceptions import InitializationError


def test_md5_digest_matches_hashlib() -> None:
    data = b"hello world"
    assert hashing.md5_digest(data) == hashlib.md5(data).digest()


def test_md5_digest_concatenates_parts() -> None:
    """Parts are hashed as one contiguous message."""
    assert hashing.md5_digest(b"pass", b"word", b"salt") == hashing.md5_digest(b"passwordsalt")


def test_md5_digest_empty() -> None:
    assert hashing.md5_digest().hex() == "d41d8cd98f00b204e9800998ecf8427e"
    assert hashing.md5_digest(b"").hex() == "d41d8cd98f00b204e9800998ecf8427e"


def test_ensure_md5_available_passes() -> None:
    hashing.ensure_md5_available()


def test_ensure_md5_available_raises_when_backend_refuses() -> None:
    """A backend without MD5 is reported as an initialization error."""
    with patch("saltedbox.core.hashing.hashes.Hash", side_effect=UnsupportedAlgorithm("md5 disabled")):
        with pytest.raises(InitializationError, match="MD5 is not available"):
            hashing.ensure_md5_available()
