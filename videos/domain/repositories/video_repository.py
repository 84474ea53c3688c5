from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update as sa_update

from videos.domain.models.video import Video
from videos.domain.platforms import Platform
from shared.abstracts.abstract_repository import AbstractRepository


class VideoRepository(AbstractRepository):

    async def insert(self, owner_id: UUID, payload: dict) -> Video:
        obj = Video(owner_id=owner_id, **payload)
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def get(self, owner_id: UUID, video_id: UUID) -> Optional[Video]:
        res = await self.db.execute(
            select(Video).where(Video.id == video_id, Video.owner_id == owner_id)
        )
        return res.scalars().first()

    async def update(self, owner_id: UUID, video_id: UUID, payload: dict) -> Optional[Video]:
        obj = await self.get(owner_id, video_id)
        if not obj:
            return None
        for field, value in payload.items():
            setattr(obj, field, value)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def delete(self, owner_id: UUID, video_id: UUID) -> bool:
        res = await self.db.execute(
            delete(Video).where(Video.id == video_id, Video.owner_id == owner_id)
        )
        await self.db.commit()
        # rowcount can be None on some DBs; coerce safely
        return bool(getattr(res, "rowcount", 0))

    async def list(self, owner_id: UUID, **filters) -> Sequence[Video]:
        category_id = filters.get("category_id")
        platform = filters.get("platform")
        q = filters.get("q")
        limit = filters.get("limit")
        offset = filters.get("offset")

        stmt = select(Video).where(Video.owner_id == owner_id)
        if category_id:
            stmt = stmt.where(Video.category_id == category_id)
        if platform:
            stmt = stmt.where(Video.platform == Platform(platform))
        if q:
            like = f"%{q}%"
            stmt = stmt.where(or_(Video.title.ilike(like), Video.channel_name.ilike(like)))

        stmt = stmt.order_by(Video.created_at.desc(), Video.id).limit(limit).offset(offset)
        res = await self.db.execute(stmt)
        return res.scalars().all()

    async def count_by_platform(self, owner_id: UUID) -> Dict[Platform, int]:
        res = await self.db.execute(
            select(Video.platform, func.count(Video.id))
            .where(Video.owner_id == owner_id)
            .group_by(Video.platform)
        )
        return {platform: count for platform, count in res.all()}

    async def count(self, owner_id: UUID) -> int:
        res = await self.db.execute(select(func.count(Video.id)).where(Video.owner_id == owner_id))
        return res.scalar_one()

    async def clear_category(self, owner_id: UUID, category_id: UUID) -> List[UUID]:
        """Un-tag the owner's videos in this category and return their ids (no commit)."""
        res = await self.db.execute(
            select(Video.id).where(Video.owner_id == owner_id, Video.category_id == category_id)
        )
        ids = list(res.scalars().all())
        # SQLite ignores ON DELETE SET NULL unless foreign keys are enabled
        await self.db.execute(
            sa_update(Video)
            .where(Video.owner_id == owner_id, Video.category_id == category_id)
            .values(category_id=None)
        )
        return ids
