"""Entity to DTO mappers.

Mappers are stateless functions that copy ORM rows into the pydantic
schemas returned by the API.
"""

from projecthub.mappers.user import user_to_dto, users_to_dtos

__all__ = ["user_to_dto", "users_to_dtos"]
