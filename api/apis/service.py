"""
API-descriptor business logic.

Parameters are always loaded in one batch per request (`fetch_parameters`),
never one query per API.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from core.db import Database
from core.schemas import MessageResponse

from . import repository, schemas

logger = logging.getLogger(__name__)


def to_api_response(row: dict, parameters: list[str]) -> schemas.ApiResponse:
    return schemas.ApiResponse(
        api_id=int(row["api_id"]),
        user_id=int(row["user_id"]),
        api_name=str(row["api_name"] or ""),
        api_string=str(row["api_string"] or ""),
        api_key=str(row["api_key"] or ""),
        graph_type=str(row["graph_type"] or ""),
        pane_x=int(row["pane_x"] or 0),
        pane_y=int(row["pane_y"] or 0),
        parameters=[schemas.Parameter(parameter=p) for p in parameters],
    )


async def attach_parameters(db: Database, rows: list[dict]) -> list[schemas.ApiResponse]:
    api_ids = [int(row["api_id"]) for row in rows]
    by_api = await repository.fetch_parameters(db, api_ids)
    return [to_api_response(row, by_api.get(int(row["api_id"]), [])) for row in rows]


async def create_api(db: Database, payload: schemas.CreateApiRequest) -> schemas.ApiResponse:
    parameters = [p.parameter for p in payload.parameters]
    try:
        api_id = await repository.insert_api_with_parameters(
            db,
            user_id=payload.user_id,
            api_name=payload.api_name,
            api_string=payload.api_string,
            api_key=payload.api_key,
            graph_type=payload.graph_type,
            pane_x=payload.pane_x,
            pane_y=payload.pane_y,
            parameters=parameters,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.") from exc

    logger.info(
        "api_created api_id=%s user_id=%s parameters=%s",
        api_id,
        payload.user_id,
        len(parameters),
    )
    return schemas.ApiResponse(
        api_id=api_id,
        user_id=payload.user_id,
        api_name=payload.api_name,
        api_string=payload.api_string,
        api_key=payload.api_key,
        graph_type=payload.graph_type,
        pane_x=payload.pane_x,
        pane_y=payload.pane_y,
        parameters=list(payload.parameters),
    )


async def list_apis_for_user(db: Database, user_id: int) -> list[schemas.ApiResponse]:
    rows = await repository.list_apis_for_user(db, user_id)
    return await attach_parameters(db, rows)


async def delete_api(db: Database, api_id: int) -> MessageResponse:
    deleted = await repository.delete_api(db, api_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="API not found.")

    logger.info("api_deleted api_id=%s", api_id)
    return MessageResponse(message="API deleted successfully")
