"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import CamelModel, Email, MessageResponse, Name

__all__ = [
    "CreateUserRequest",
    "LoginRequest",
    "MessageResponse",
    "UpdateUserRequest",
    "UserIdResponse",
    "UserResponse",
]


class CreateUserRequest(CamelModel):
    name: Name
    email: Email
    # Passwords are taken verbatim; whitespace is significant.
    password: str = Field(..., min_length=1, max_length=72)


class UpdateUserRequest(CamelModel):
    name: Name
    email: Email


class LoginRequest(CamelModel):
    email: Email
    password: str = Field(..., min_length=1, max_length=72)


class UserResponse(CamelModel):
    id: int
    name: str
    email: str


class UserIdResponse(CamelModel):
    user_id: int
