"""
Dashboard API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_db
from core.schemas import MessageResponse, RowIdPath

from . import schemas, service

router = APIRouter()


@router.post("/createDashboard", response_model=schemas.DashboardResponse)
async def create_dashboard(
    payload: schemas.CreateDashboardRequest,
    db: Database = Depends(get_db),
) -> schemas.DashboardResponse:
    return await service.create_dashboard(db, payload)


@router.get("/dashboards/user/{user_id}", response_model=list[schemas.DashboardResponse])
async def list_dashboards(
    user_id: RowIdPath,
    db: Database = Depends(get_db),
) -> list[schemas.DashboardResponse]:
    return await service.list_dashboards_for_user(db, user_id)


@router.get("/dashboards/{dashboard_id}", response_model=schemas.DashboardDetailResponse)
async def get_dashboard(
    dashboard_id: RowIdPath,
    db: Database = Depends(get_db),
) -> schemas.DashboardDetailResponse:
    """
    Dashboard plus its panes, each pane an API with parameters.
    """
    return await service.get_dashboard(db, dashboard_id)


@router.put("/dashboards/{dashboard_id}", response_model=schemas.DashboardResponse)
async def rename_dashboard(
    dashboard_id: RowIdPath,
    payload: schemas.UpdateDashboardRequest,
    db: Database = Depends(get_db),
) -> schemas.DashboardResponse:
    return await service.rename_dashboard(db, dashboard_id, payload)


@router.delete("/dashboards/{dashboard_id}", response_model=MessageResponse)
async def delete_dashboard(dashboard_id: RowIdPath, db: Database = Depends(get_db)) -> MessageResponse:
    return await service.delete_dashboard(db, dashboard_id)


@router.post("/dashboards/{dashboard_id}/panes", response_model=MessageResponse)
async def add_pane(
    dashboard_id: RowIdPath,
    payload: schemas.AddPaneRequest,
    db: Database = Depends(get_db),
) -> MessageResponse:
    return await service.add_pane(db, dashboard_id, payload)


@router.delete("/dashboards/{dashboard_id}/panes/{api_id}", response_model=MessageResponse)
async def remove_pane(
    dashboard_id: RowIdPath,
    api_id: RowIdPath,
    db: Database = Depends(get_db),
) -> MessageResponse:
    return await service.remove_pane(db, dashboard_id, api_id)
