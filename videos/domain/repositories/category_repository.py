from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import select, delete, func

from videos.domain.models.category import Category
from shared.abstracts.abstract_repository import AbstractRepository


class CategoryRepository(AbstractRepository):
    # ---------- Query helpers ----------

    async def get_by_name(self, owner_id: UUID, name: str) -> Optional[Category]:
        res = await self.db.execute(
            select(Category).where(Category.owner_id == owner_id, Category.name == name)
        )
        return res.scalars().first()

    async def count(self, owner_id: UUID) -> int:
        res = await self.db.execute(select(func.count(Category.id)).where(Category.owner_id == owner_id))
        return res.scalar_one()

    async def seed(self, owner_id: UUID, defaults: Iterable[Tuple[str, str]]) -> List[Category]:
        """Insert the given ``(name, color)`` pairs in one commit."""
        rows = [Category(owner_id=owner_id, name=name, color=color) for name, color in defaults]
        self.db.add_all(rows)
        await self.db.commit()
        return rows

    # ---------- AbstractRepository CRUD ----------

    async def insert(self, owner_id: UUID, payload) -> Category:
        obj = Category(owner_id=owner_id, name=payload.name, color=payload.color)
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def get(self, owner_id: UUID, category_id: UUID) -> Optional[Category]:
        res = await self.db.execute(
            select(Category).where(Category.id == category_id, Category.owner_id == owner_id)
        )
        return res.scalars().first()

    async def update(self, owner_id: UUID, category_id: UUID, payload) -> Optional[Category]:
        obj = await self.get(owner_id, category_id)
        if not obj:
            return None
        data = payload.model_dump(exclude_unset=True)
        for field in ("name", "color"):
            if data.get(field) is not None:
                setattr(obj, field, data[field])
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def delete(self, owner_id: UUID, category_id: UUID) -> bool:
        res = await self.db.execute(
            delete(Category).where(Category.id == category_id, Category.owner_id == owner_id)
        )
        await self.db.commit()
        return bool(getattr(res, "rowcount", 0))

    async def list(self, owner_id: UUID, **filters) -> Sequence[Category]:
        res = await self.db.execute(
            select(Category).where(Category.owner_id == owner_id).order_by(Category.name.asc())
        )
        return res.scalars().all()
