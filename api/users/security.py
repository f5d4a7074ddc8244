"""
Password hashing helpers.
"""

from __future__ import annotations

import bcrypt

from core import config

# bcrypt only looks at the first 72 bytes.
MAX_PASSWORD_BYTES = 72


class PasswordError(ValueError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordError("Password is empty.")
    if len(password) > MAX_PASSWORD_BYTES:
        raise PasswordError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
    salt = bcrypt.gensalt(rounds=config.bcrypt_rounds())
    return bcrypt.hashpw(password, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
