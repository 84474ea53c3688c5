from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func, or_, select

from links.domain.models.link import Link
from links.domain.entities.link import LinkCreate, LinkUpdate
from shared.abstracts.abstract_repository import AbstractRepository


class LinkRepository(AbstractRepository):

    async def insert(self, owner_id: UUID, payload: LinkCreate) -> Link:
        obj = Link(
            owner_id=owner_id,
            title=payload.title,
            url=payload.url,
            favicon=payload.favicon,
            tags=list(payload.tags),
        )
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def get(self, owner_id: UUID, link_id: UUID) -> Optional[Link]:
        res = await self.db.execute(select(Link).where(Link.id == link_id, Link.owner_id == owner_id))
        return res.scalars().first()

    async def update(self, owner_id: UUID, link_id: UUID, payload: LinkUpdate) -> Optional[Link]:
        obj = await self.get(owner_id, link_id)
        if not obj:
            return None
        return await self.apply(obj, payload)

    async def apply(self, obj: Link, payload: LinkUpdate) -> Link:
        data = payload.model_dump(exclude_unset=True)
        for field in ("title", "url", "tags"):
            if data.get(field) is not None:
                setattr(obj, field, data[field])
        if "favicon" in data:
            obj.favicon = data["favicon"]
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def delete(self, owner_id: UUID, link_id: UUID) -> bool:
        res = await self.db.execute(delete(Link).where(Link.id == link_id, Link.owner_id == owner_id))
        await self.db.commit()
        return bool(getattr(res, "rowcount", 0))

    async def list(self, owner_id: UUID, **filters) -> Sequence[Link]:
        q = filters.get("q")
        stmt = select(Link).where(Link.owner_id == owner_id)
        if q:
            like = f"%{q}%"
            stmt = stmt.where(or_(Link.title.ilike(like), Link.url.ilike(like)))
        stmt = stmt.order_by(Link.created_at.desc()).limit(filters.get("limit")).offset(filters.get("offset"))
        res = await self.db.execute(stmt)
        return res.scalars().all()

    async def count(self, owner_id: UUID) -> int:
        res = await self.db.execute(select(func.count(Link.id)).where(Link.owner_id == owner_id))
        return res.scalar_one()
