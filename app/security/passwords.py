"""bcrypt helpers for user passwords."""

from __future__ import annotations

import bcrypt

from ..config import get_settings

# bcrypt only reads the first 72 bytes of its input and rejects anything longer.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a salted bcrypt hash of ``password``.

    Parameters
    ----------
    password:
        Plaintext password supplied by the caller.
    rounds:
        bcrypt cost factor; defaults to ``BCRYPT_ROUNDS`` from the settings.
    """

    salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Return ``True`` when ``password`` matches the stored bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
