"""User entity to UserDTO conversion."""

from collections.abc import Iterable

from projecthub.models.user import User
from projecthub.schemas.user import UserDTO


def user_to_dto(user: User | None) -> UserDTO | None:
    """Convert a User row to its API representation.

    Args:
        user: The persisted user, or None.

    Returns:
        A new UserDTO with every field copied verbatim and ``created_at``
        rendered with ``datetime.isoformat()``, or None if ``user`` is None.

    Raises:
        AttributeError: If ``user.created_at`` is None.
    """
    if user is None:
        return None
    return UserDTO(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        program=user.program,
        description=user.description,
        created_at=user.created_at.isoformat(),
    )


def users_to_dtos(users: Iterable[User]) -> list[UserDTO]:
    """Convert a sequence of users, preserving order."""
    return [user_to_dto(user) for user in users]
