"""
Shared wire-model building blocks.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

# Postgres INT / SERIAL range.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
RowId = Annotated[int, Field(ge=1, le=INT32_MAX)]
RowIdPath = Annotated[int, Path(ge=1, le=INT32_MAX)]

# Required text: surrounding whitespace is stripped before the length check,
# so blank values are rejected.
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
Email = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=320)]


class CamelModel(BaseModel):
    """
    Base for wire models: snake_case in Python, camelCase on the wire.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    message: str
