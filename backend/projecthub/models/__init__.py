"""SQLAlchemy models."""

from projecthub.models.user import User

__all__ = ["User"]
