"""Small helper to resolve runtime settings for the CLI."""

from __future__ import annotations

from typing import Optional
import getpass
import os

PASSWORD_ENV_VAR = "SALTEDBOX_PASSWORD"


def resolve_password(explicit: Optional[str] = None, confirm: bool = False) -> str:
    """
    Return the password to use for a command.

    Resolution order:

    - ``explicit`` (the ``--password`` option) when given
    - the environment variable ``SALTEDBOX_PASSWORD`` when set
    - an interactive :func:`getpass.getpass` prompt; with ``confirm`` the
      password is asked twice and a mismatch raises ``ValueError``

    An empty password is accepted from the option or the environment. The
    prompt returns whatever was typed, including an empty string.
    """
    if explicit is not None:
        return explicit

    from_env = os.getenv(PASSWORD_ENV_VAR)
    if from_env is not None:
        return from_env

    password = getpass.getpass("Password: ")
    if confirm and getpass.getpass("Confirm password: ") != password:
        raise ValueError("Passwords do not match")
    return password
