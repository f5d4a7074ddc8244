"""
User persistence helpers.
"""

from __future__ import annotations

from core.db import Database, affected_rows

_USER_COLUMNS = "id, name, email"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def list_users(db: Database) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_USER_COLUMNS}
        FROM users
        ORDER BY id
        """
    )


async def get_user_by_id(db: Database, user_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def get_user_by_email(db: Database, email: str) -> dict | None:
    """
    Includes `password_hash`; callers must not serialize the row as-is.
    """
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}, password_hash
        FROM users
        WHERE lower(email) = lower($1)
        """,
        normalize_email(email),
    )


async def get_user_id_by_email(db: Database, email: str) -> int | None:
    row = await db.fetch_one(
        """
        SELECT id
        FROM users
        WHERE lower(email) = lower($1)
        LIMIT 1
        """,
        normalize_email(email),
    )
    return int(row["id"]) if row is not None else None


async def create_user(db: Database, *, name: str, email: str, password_hash: str) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO users (name, email, password_hash)
        VALUES ($1, $2, $3)
        RETURNING {_USER_COLUMNS}
        """,
        name,
        normalize_email(email),
        password_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def update_user(db: Database, user_id: int, *, name: str, email: str) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE users
        SET name = $2,
            email = $3
        WHERE id = $1
        RETURNING {_USER_COLUMNS}
        """,
        user_id,
        name,
        normalize_email(email),
    )


async def delete_user(db: Database, user_id: int) -> bool:
    """
    APIs, parameters, dashboards and panes go with the user (ON DELETE CASCADE).
    """
    status = await db.execute("DELETE FROM users WHERE id = $1", user_id)
    return affected_rows(status) > 0
