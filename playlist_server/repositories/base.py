# Copyright (C) 2024 Playlist Server Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

"""Shared CRUD plumbing for entity repositories."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from playlist_server.errors import ConflictError, NotFoundError
from playlist_server.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@asynccontextmanager
async def translate_conflicts(session: AsyncSession, message: str) -> AsyncIterator[None]:
    """Turn storage constraint failures (unique, foreign key) into ConflictError."""
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.info("Constraint violation: %s", e.orig)
        raise ConflictError(message) from e


class Repository(Generic[ModelT]):
    """CRUD primitives for one table. Subclasses set model, label and list ordering."""

    model: ClassVar[type]
    label: ClassVar[str]
    # Columns nullable through update when sent explicitly as null
    nullable_updates: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def not_found(self) -> str:
        return f"{self.label} not found"

    def default_order(self) -> tuple:
        return (self.model.created_at.desc(), self.model.id.desc())

    async def list_all(self) -> list[ModelT]:
        result = await self.session.execute(select(self.model).order_by(*self.default_order()))
        return list(result.scalars().all())

    async def find(self, entity_id: int) -> ModelT | None:
        return await self.session.get(self.model, entity_id)

    async def get(self, entity_id: int) -> ModelT:
        row = await self.find(entity_id)
        if row is None:
            raise NotFoundError(self.not_found)
        return row

    async def insert(self, fields: dict[str, Any], conflict: str | None = None) -> ModelT:
        """Insert a row, commit, and return it re-read from storage."""
        row = self.model(**fields)
        self.session.add(row)
        async with translate_conflicts(self.session, conflict or f"{self.label} conflicts with existing data"):
            await self.session.commit()
        await self.session.refresh(row)
        return row

    async def update(self, entity_id: int, fields: dict[str, Any], conflict: str | None = None) -> ModelT:
        """Coalesce update: None keeps the stored value unless the column allows explicit null."""
        row = await self.get(entity_id)
        for name, value in fields.items():
            if value is None and name not in self.nullable_updates:
                continue
            setattr(row, name, value)
        async with translate_conflicts(self.session, conflict or f"{self.label} conflicts with existing data"):
            await self.session.commit()
        await self.session.refresh(row)
        return row

    async def delete(self, entity_id: int) -> None:
        await self.get(entity_id)
        async with translate_conflicts(self.session, f"{self.label} is still referenced"):
            # Core delete so storage-level ON DELETE rules do the cascading
            await self.session.execute(delete(self.model).where(self.model.id == entity_id))
            await self.session.commit()
        logger.info("Deleted %s %s", self.label.lower(), entity_id)
