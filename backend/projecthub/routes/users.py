"""User API routes.

CRUD endpoints for project hub users. Every response body is built by
projecthub.mappers.user so the wire format stays in one place.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from projecthub.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from projecthub.database import get_db
from projecthub.mappers.user import user_to_dto, users_to_dtos
from projecthub.models.user import User
from projecthub.repositories.user import DuplicateEmailError, UserNotFoundError, UserRepository
from projecthub.schemas.user import UserCreate, UserDTO, UserListResponse, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _to_dto(user: User) -> UserDTO:
    """Map a loaded user, logging rows that cannot be rendered."""
    try:
        return user_to_dto(user)
    except AttributeError:
        logger.exception("User %s has no created_at timestamp", user.id)
        raise


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found",
    )


@router.get("", response_model=UserListResponse)
async def list_users(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> UserListResponse:
    """List users with pagination.

    Args:
        skip: Number of records to skip (pagination offset).
        limit: Maximum number of records to return.

    Returns:
        Paginated list of users, newest first.
    """
    users, total = await UserRepository(db).list_users(skip=skip, limit=limit)
    return UserListResponse(
        items=users_to_dtos(users),
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/{user_id}", response_model=UserDTO)
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
) -> UserDTO:
    """Get a single user by ID.

    Raises:
        HTTPException: 404 if user not found.
    """
    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        raise _not_found()
    return _to_dto(user)


@router.post("", response_model=UserDTO, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
) -> UserDTO:
    """Create a new user.

    Raises:
        HTTPException: 409 if the email is already taken.
    """
    try:
        user = await UserRepository(db).create(user_data)
    except DuplicateEmailError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_dto(user)


@router.patch("/{user_id}", response_model=UserDTO)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    db: AsyncSession = Depends(get_db),
) -> UserDTO:
    """Update an existing user.

    Raises:
        HTTPException: 404 if user not found, 409 if the new email is taken.
    """
    try:
        user = await UserRepository(db).update(user_id, user_data)
    except UserNotFoundError as exc:
        raise _not_found() from exc
    except DuplicateEmailError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _to_dto(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Delete a user.

    Raises:
        HTTPException: 404 if user not found.
    """
    if not await UserRepository(db).delete(user_id):
        raise _not_found()
