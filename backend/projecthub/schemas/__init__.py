"""Pydantic schemas."""

from projecthub.schemas.user import UserCreate, UserDTO, UserListResponse, UserUpdate

__all__ = [
    "UserCreate",
    "UserDTO",
    "UserListResponse",
    "UserUpdate",
]
