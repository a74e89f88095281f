"""Pydantic schemas for the User API.

Field names are snake_case in Python and camelCase on the wire
(``firstName``, ``createdAt``); both spellings are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserDTO(BaseModel):
    """Flat, client-facing view of a user.

    Every field is nullable. ``created_at`` is the ISO-8601 rendering of the
    stored timestamp, not a datetime.
    """

    model_config = _CAMEL_CONFIG

    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    description: str | None = None
    program: str | None = None
    created_at: str | None = None


class UserCreate(BaseModel):
    """Schema for creating a new user."""

    model_config = _CAMEL_CONFIG

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    description: str | None = None
    program: str | None = Field(default=None, max_length=255)


class UserUpdate(BaseModel):
    """Schema for updating a user. Only fields that are sent are applied."""

    model_config = _CAMEL_CONFIG

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    description: str | None = None
    program: str | None = Field(default=None, max_length=255)


class UserListResponse(BaseModel):
    """Paginated list of users."""

    items: list[UserDTO]
    total: int
    skip: int
    limit: int
