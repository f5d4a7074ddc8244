"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db
from core.schemas import RowIdPath

from . import schemas, service

router = APIRouter()


@router.get("/users", response_model=list[schemas.UserResponse])
async def list_users(db: Database = Depends(get_db)) -> list[schemas.UserResponse]:
    return await service.list_users(db)


@router.post("/users", response_model=schemas.UserResponse)
async def create_user(
    payload: schemas.CreateUserRequest,
    db: Database = Depends(get_db),
) -> schemas.UserResponse:
    return await service.create_user(db, payload)


@router.get("/users/{user_id}", response_model=schemas.UserResponse)
async def get_user(user_id: RowIdPath, db: Database = Depends(get_db)) -> schemas.UserResponse:
    return await service.get_user(db, user_id)


@router.put("/users/{user_id}", response_model=schemas.UserResponse)
async def update_user(
    user_id: RowIdPath,
    payload: schemas.UpdateUserRequest,
    db: Database = Depends(get_db),
) -> schemas.UserResponse:
    return await service.update_user(db, user_id, payload)


@router.delete("/users/{user_id}", response_model=schemas.MessageResponse)
async def delete_user(user_id: RowIdPath, db: Database = Depends(get_db)) -> schemas.MessageResponse:
    return await service.delete_user(db, user_id)


@router.post("/login", response_model=schemas.UserResponse)
async def login(
    payload: schemas.LoginRequest,
    db: Database = Depends(get_db),
) -> schemas.UserResponse:
    """
    Verify email + password. The response never carries the password.
    """
    return await service.login(db, payload)


@router.get("/getID/{email}", response_model=schemas.UserIdResponse)
async def get_user_id_by_email(email: str, db: Database = Depends(get_db)) -> schemas.UserIdResponse:
    return await service.get_user_id_by_email(db, email)
