"""
User business logic.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from core.db import Database

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        name=str(user_row["name"] or ""),
        email=str(user_row["email"] or ""),
    )


def _user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")


def _email_taken() -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email is already registered.")


async def list_users(db: Database) -> list[schemas.UserResponse]:
    rows = await repository.list_users(db)
    return [_to_user_response(row) for row in rows]


async def get_user(db: Database, user_id: int) -> schemas.UserResponse:
    row = await repository.get_user_by_id(db, user_id)
    if row is None:
        raise _user_not_found()
    return _to_user_response(row)


async def get_user_id_by_email(db: Database, email: str) -> schemas.UserIdResponse:
    user_id = await repository.get_user_id_by_email(db, email)
    if user_id is None:
        raise _user_not_found()
    return schemas.UserIdResponse(user_id=user_id)


async def create_user(db: Database, payload: schemas.CreateUserRequest) -> schemas.UserResponse:
    existing = await repository.get_user_by_email(db, payload.email)
    if existing is not None:
        raise _email_taken()

    try:
        password_hash = security.hash_password(payload.password)
    except security.PasswordError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    try:
        row = await repository.create_user(
            db,
            name=payload.name,
            email=payload.email,
            password_hash=password_hash,
        )
    except asyncpg.UniqueViolationError as exc:
        # Lost a race with a concurrent registration of the same email.
        raise _email_taken() from exc

    logger.info("user_created user_id=%s", row["id"])
    return _to_user_response(row)


async def update_user(
    db: Database,
    user_id: int,
    payload: schemas.UpdateUserRequest,
) -> schemas.UserResponse:
    try:
        row = await repository.update_user(db, user_id, name=payload.name, email=payload.email)
    except asyncpg.UniqueViolationError as exc:
        raise _email_taken() from exc
    if row is None:
        raise _user_not_found()

    logger.info("user_updated user_id=%s", user_id)
    return _to_user_response(row)


async def delete_user(db: Database, user_id: int) -> schemas.MessageResponse:
    deleted = await repository.delete_user(db, user_id)
    if not deleted:
        raise _user_not_found()

    logger.info("user_deleted user_id=%s", user_id)
    return schemas.MessageResponse(message="User deleted")


async def login(db: Database, payload: schemas.LoginRequest) -> schemas.UserResponse:
    user_row = await repository.get_user_by_email(db, payload.email)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
        )

    is_valid = security.verify_password(payload.password, str(user_row.get("password_hash") or ""))
    if not is_valid:
        logger.info("login_failed user_id=%s", user_row["id"])
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
        )

    return _to_user_response(user_row)
