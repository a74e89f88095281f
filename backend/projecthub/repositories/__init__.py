"""Repository layer for data access.

Repositories encapsulate database operations and provide a clean interface
for CRUD operations on domain objects.
"""

from projecthub.repositories.user import DuplicateEmailError, UserNotFoundError, UserRepository

__all__ = ["DuplicateEmailError", "UserNotFoundError", "UserRepository"]
