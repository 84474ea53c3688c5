from typing import Iterable, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import delete, or_, select

from links.domain.models.link import Link
from shared.abstracts.abstract_repository import SessionRepository
from users.models.user import User
from videos.domain.models.video import Video


class AdminRepository(SessionRepository):
    """Cross-user reads and writes; callers must already be admins."""

    async def list_links(self, q: Optional[str] = None, limit: int = 500) -> Sequence[Tuple[Link, str, Optional[str]]]:
        stmt = select(Link, User.email, User.display_name).join(User, User.id == Link.owner_id)
        if q:
            like = f"%{q}%"
            stmt = stmt.where(
                or_(
                    Link.title.ilike(like),
                    Link.url.ilike(like),
                    User.email.ilike(like),
                    User.display_name.ilike(like),
                )
            )
        stmt = stmt.order_by(Link.created_at.desc()).limit(limit)
        res = await self.db.execute(stmt)
        return [tuple(row) for row in res.all()]

    async def list_videos(self, q: Optional[str] = None, limit: int = 500) -> Sequence[Tuple[Video, str, Optional[str]]]:
        stmt = select(Video, User.email, User.display_name).join(User, User.id == Video.owner_id)
        if q:
            like = f"%{q}%"
            stmt = stmt.where(
                or_(
                    Video.title.ilike(like),
                    Video.url.ilike(like),
                    User.email.ilike(like),
                    User.display_name.ilike(like),
                )
            )
        stmt = stmt.order_by(Video.created_at.desc()).limit(limit)
        res = await self.db.execute(stmt)
        return [tuple(row) for row in res.all()]

    async def get_link(self, link_id: UUID) -> Optional[Link]:
        res = await self.db.execute(select(Link).where(Link.id == link_id))
        return res.scalars().first()

    async def update_link(self, link: Link, title: Optional[str], url: Optional[str]) -> Link:
        if title is not None:
            link.title = title
        if url is not None:
            link.url = url
        await self.db.commit()
        await self.db.refresh(link)
        return link

    async def delete_links(self, ids: Iterable[UUID]) -> int:
        idlist = list(ids)
        if not idlist:
            return 0
        res = await self.db.execute(delete(Link).where(Link.id.in_(idlist)))
        await self.db.commit()
        return res.rowcount or 0
