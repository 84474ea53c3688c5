from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession


class SessionRepository:
    """Holds the AsyncSession shared by every repository of one request."""

    def __init__(self, db: AsyncSession):
        self.db = db


class AbstractRepository(SessionRepository, ABC):
    """
    Minimal CRUD contract for rows owned by a user.

    Rows are looked up by ``(owner_id, id)`` so one user's ids never
    resolve another user's rows.
    """

    @abstractmethod
    async def insert(self, owner_id, payload): ...

    @abstractmethod
    async def update(self, owner_id, entity_id, payload): ...

    @abstractmethod
    async def delete(self, owner_id, entity_id) -> bool: ...

    @abstractmethod
    async def get(self, owner_id, entity_id): ...

    @abstractmethod
    async def list(self, owner_id, **filters): ...
