"""
Dashboard business logic.

Scope:
- dashboards owned by a user (create/list/get/rename/delete)
- panes: the dashboard <-> API association
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from apis import repository as api_repository
from apis import service as api_service
from core.db import Database
from core.schemas import MessageResponse

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_dashboard_response(row: dict) -> schemas.DashboardResponse:
    return schemas.DashboardResponse(
        id=int(row["dashboard_id"]),
        user_id=int(row["user_id"]),
        name=str(row["name"] or ""),
    )


def _dashboard_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dashboard not found.")


async def create_dashboard(
    db: Database,
    payload: schemas.CreateDashboardRequest,
) -> schemas.DashboardResponse:
    try:
        row = await repository.create_dashboard(db, user_id=payload.user_id, name=payload.name)
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.") from exc

    logger.info("dashboard_created dashboard_id=%s user_id=%s", row["dashboard_id"], payload.user_id)
    return _to_dashboard_response(row)


async def list_dashboards_for_user(db: Database, user_id: int) -> list[schemas.DashboardResponse]:
    rows = await repository.list_dashboards_for_user(db, user_id)
    return [_to_dashboard_response(row) for row in rows]


async def get_dashboard(db: Database, dashboard_id: int) -> schemas.DashboardDetailResponse:
    row = await repository.get_dashboard(db, dashboard_id)
    if row is None:
        raise _dashboard_not_found()

    api_rows = await api_repository.list_apis_for_dashboard(db, dashboard_id)
    panes = await api_service.attach_parameters(db, api_rows)

    dashboard = _to_dashboard_response(row)
    return schemas.DashboardDetailResponse(**dashboard.model_dump(), panes=panes)


async def rename_dashboard(
    db: Database,
    dashboard_id: int,
    payload: schemas.UpdateDashboardRequest,
) -> schemas.DashboardResponse:
    row = await repository.rename_dashboard(db, dashboard_id, name=payload.name)
    if row is None:
        raise _dashboard_not_found()

    logger.info("dashboard_renamed dashboard_id=%s", dashboard_id)
    return _to_dashboard_response(row)


async def delete_dashboard(db: Database, dashboard_id: int) -> MessageResponse:
    deleted = await repository.delete_dashboard(db, dashboard_id)
    if not deleted:
        raise _dashboard_not_found()

    logger.info("dashboard_deleted dashboard_id=%s", dashboard_id)
    return MessageResponse(message="Dashboard deleted successfully")


async def add_pane(
    db: Database,
    dashboard_id: int,
    payload: schemas.AddPaneRequest,
) -> MessageResponse:
    try:
        created = await repository.add_pane(db, dashboard_id=dashboard_id, api_id=payload.api_id)
    except asyncpg.ForeignKeyViolationError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Dashboard or API not found.",
        ) from exc

    if created:
        logger.info("pane_added dashboard_id=%s api_id=%s", dashboard_id, payload.api_id)
        return MessageResponse(message="Pane added to dashboard successfully")
    return MessageResponse(message="Pane already on dashboard")


async def remove_pane(db: Database, dashboard_id: int, api_id: int) -> MessageResponse:
    removed = await repository.remove_pane(db, dashboard_id=dashboard_id, api_id=api_id)
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pane not found.")

    logger.info("pane_removed dashboard_id=%s api_id=%s", dashboard_id, api_id)
    return MessageResponse(message="Pane removed from dashboard successfully")
