"""Unit tests for the SaltedBox command line front end."""

import base64
import logging
from unittest.mock import patch

import pyperclip
import pytest

from saltedbox.frontend.cli.app import (
    main,
    EXIT_OK,
    EXIT_WRONG_PASSWORD,
    EXIT_MALFORMED,
    EXIT_IO_ERROR,
)
from saltedbox.frontend.cli.context import PASSWORD_ENV_VAR
from saltedbox.security.encryption import encrypt_bytes

PINNED_B64 = "U2FsdGVkX18AAQIDBAUGBzGKEJVrkn7au3vI8SMm1ic="


# --- Fixtures ---

@pytest.fixture(autouse=True)
def no_env_password(monkeypatch):
    monkeypatch.delenv(PASSWORD_ENV_VAR, raising=False)


@pytest.fixture
def mock_clipboard():
    with patch("saltedbox.frontend.cli.app.pyperclip.copy") as mock:
        yield mock


# --- String commands ---

def test_encrypt_then_decrypt_string(capsys):
    assert main(["encrypt-string", "hello, world", "--password", "pw"]) == EXIT_OK
    encoded = capsys.readouterr().out.strip()
    assert base64.b64decode(encoded)[:8] == b"Salted__"

    assert main(["decrypt-string", encoded, "--password", "pw"]) == EXIT_OK
    assert capsys.readouterr().out == "hello, world\n"


def test_decrypt_string_pinned_vector_from_env(monkeypatch, capsys):
    monkeypatch.setenv(PASSWORD_ENV_VAR, "pw")
    assert main(["decrypt-string", PINNED_B64]) == EXIT_OK
    assert capsys.readouterr().out == "hello, world\n"


def test_decrypt_string_wrong_password(capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["decrypt-string", PINNED_B64, "--password", "wrong"]) == EXIT_WRONG_PASSWORD
    assert capsys.readouterr().out == ""
    assert "wrong password" in caplog.text


def test_decrypt_string_invalid_base64():
    assert main(["decrypt-string", "***", "--password", "pw"]) == EXIT_MALFORMED


def test_decrypt_string_non_utf8_plaintext(capsys):
    encoded = base64.b64encode(encrypt_bytes(b"\xff\xfe", "pw")).decode()
    assert main(["decrypt-string", encoded, "--password", "pw"]) == EXIT_MALFORMED
    assert capsys.readouterr().out == ""


def test_decrypt_string_strict_header():
    relabelled = base64.b64encode(b"XXXXXXXX" + base64.b64decode(PINNED_B64)[8:]).decode()
    assert main(["decrypt-string", relabelled, "--password", "pw"]) == EXIT_OK
    assert main(["decrypt-string", relabelled, "--password", "pw", "--strict-header"]) == EXIT_MALFORMED


def test_encrypt_string_copy(capsys, mock_clipboard):
    assert main(["encrypt-string", "secret", "--password", "pw", "--copy"]) == EXIT_OK
    encoded = capsys.readouterr().out.strip()
    mock_clipboard.assert_called_once_with(encoded)


def test_encrypt_string_copy_failure_still_succeeds(capsys, mock_clipboard):
    mock_clipboard.side_effect = pyperclip.PyperclipException("no clipboard")
    assert main(["encrypt-string", "secret", "--password", "pw", "--copy"]) == EXIT_OK
    assert capsys.readouterr().out.strip() != ""


def test_encrypt_string_prompt_mismatch():
    with patch("saltedbox.frontend.cli.context.getpass.getpass", side_effect=["a", "b"]):
        assert main(["encrypt-string", "secret"]) == EXIT_MALFORMED


# --- File commands ---

def test_encrypt_then_decrypt_file(tmp_path):
    src = tmp_path / "config.yml"
    src.write_text("api_key: 1234\n", encoding="utf-8")
    enc = tmp_path / "config.yml.enc"
    out = tmp_path / "config.out.yml"

    assert main(["encrypt-file", str(src), str(enc), "--password", "pw"]) == EXIT_OK
    assert enc.read_bytes()[:8] == b"Salted__"
    assert main(["-v", "decrypt-file", str(enc), str(out), "--password", "pw"]) == EXIT_OK
    assert out.read_text(encoding="utf-8") == "api_key: 1234\n"


def test_decrypt_file_wrong_password(tmp_path):
    enc = tmp_path / "pinned.enc"
    enc.write_bytes(base64.b64decode(PINNED_B64))
    out = tmp_path / "pinned.txt"

    assert main(["decrypt-file", str(enc), str(out), "--password", "wrong"]) == EXIT_WRONG_PASSWORD
    assert not out.exists()


def test_decrypt_file_too_short(tmp_path):
    enc = tmp_path / "short.enc"
    enc.write_bytes(b"Salted__")
    assert main(["decrypt-file", str(enc), str(tmp_path / "x"), "--password", "pw"]) == EXIT_MALFORMED


def test_missing_input_file(tmp_path):
    code = main(["encrypt-file", str(tmp_path / "missing"), str(tmp_path / "x"), "--password", "pw"])
    assert code == EXIT_IO_ERROR


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
