"""
FastAPI router for API-descriptor endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db
from core.schemas import MessageResponse, RowIdPath

from . import schemas, service

router = APIRouter()


@router.post("/createAPI", response_model=schemas.ApiResponse)
async def create_api(
    payload: schemas.CreateApiRequest,
    db: Database = Depends(get_db),
) -> schemas.ApiResponse:
    """
    Create an API descriptor and its parameters atomically.
    """
    return await service.create_api(db, payload)


@router.delete("/deleteAPI/{api_id}", response_model=MessageResponse)
async def delete_api(api_id: RowIdPath, db: Database = Depends(get_db)) -> MessageResponse:
    """
    Delete an API together with its parameters and dashboard panes.
    """
    return await service.delete_api(db, api_id)


@router.get("/apis/{user_id}", response_model=list[schemas.ApiResponse])
async def list_apis(user_id: RowIdPath, db: Database = Depends(get_db)) -> list[schemas.ApiResponse]:
    return await service.list_apis_for_user(db, user_id)
