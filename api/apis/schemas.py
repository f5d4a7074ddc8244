"""
Pydantic schemas for API-descriptor endpoints.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints

from core.schemas import CamelModel, Int32, Name, RowId

ApiString = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=4000)]


class Parameter(CamelModel):
    parameter: str = Field(..., max_length=2000)


class CreateApiRequest(CamelModel):
    user_id: RowId
    api_name: Name
    api_string: ApiString
    api_key: str = Field(default="", max_length=4000)
    graph_type: str = Field(default="", max_length=100)
    pane_x: Int32 = 0
    pane_y: Int32 = 0
    parameters: list[Parameter] = Field(default_factory=list)


class ApiResponse(CamelModel):
    api_id: int
    user_id: int
    api_name: str
    api_string: str
    api_key: str
    graph_type: str
    pane_x: int
    pane_y: int
    parameters: list[Parameter] = Field(default_factory=list)
