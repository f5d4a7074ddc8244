"""
Pydantic schemas for dashboard endpoints.
"""

from __future__ import annotations

from pydantic import Field

from apis.schemas import ApiResponse
from core.schemas import CamelModel, Name, RowId


class CreateDashboardRequest(CamelModel):
    user_id: RowId
    name: Name


class UpdateDashboardRequest(CamelModel):
    name: Name


class AddPaneRequest(CamelModel):
    api_id: RowId


class DashboardResponse(CamelModel):
    id: int
    user_id: int
    name: str


class DashboardDetailResponse(DashboardResponse):
    panes: list[ApiResponse] = Field(default_factory=list)
