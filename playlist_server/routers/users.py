# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""User API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from playlist_server.api.schemas import PathId, UserCreate, UserResponse, UserUpdate
from playlist_server.database import get_db
from playlist_server.repositories.users import UserRepository

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)) -> list[UserResponse]:
    """List users, newest first."""
    users = await UserRepository(db).list_all()
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: PathId, db: AsyncSession = Depends(get_db)) -> UserResponse:
    """Get user by ID."""
    return UserResponse.model_validate(await UserRepository(db).get(user_id))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)) -> UserResponse:
    """Create a user. 409 if the email is taken."""
    user = await UserRepository(db).create(name=data.name, email=data.email)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: PathId,
    data: UserUpdate,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Update name and/or email. 409 if the email belongs to another user."""
    user = await UserRepository(db).update(user_id, data.model_dump(exclude_unset=True))
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: PathId, db: AsyncSession = Depends(get_db)) -> None:
    """Delete a user and, through cascade, their playlists."""
    await UserRepository(db).delete(user_id)
