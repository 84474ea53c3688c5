import logging
from typing import Iterable, List, Optional
from uuid import UUID

from activity.domain.entities.activity import ActivityLogOut
from activity.domain.models.activity_log import ActivityAction
from activity.services.activity_service import ActivityService
from admin.entities.admin import AdminLinkOut, AdminLinkUpdate, AdminVideoOut
from admin.repositories.admin_repository import AdminRepository
from links.domain.entities.link import LinkOut
from videos.domain.entities.video import VideoOut

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, repo: AdminRepository, activity: ActivityService):
        self.repo = repo
        self.activity = activity

    async def list_links(self, q: Optional[str] = None) -> List[AdminLinkOut]:
        rows = await self.repo.list_links(q=q)
        return [
            AdminLinkOut(
                **LinkOut.model_validate(link).model_dump(),
                user_id=link.owner_id,
                user_email=email,
                user_name=display_name,
            )
            for link, email, display_name in rows
        ]

    async def list_videos(self, q: Optional[str] = None) -> List[AdminVideoOut]:
        rows = await self.repo.list_videos(q=q)
        return [
            AdminVideoOut(
                **VideoOut.model_validate(video).model_dump(),
                user_id=video.owner_id,
                user_email=email,
                user_name=display_name,
            )
            for video, email, display_name in rows
        ]

    async def update_link(self, admin_id: UUID, link_id: UUID, payload: AdminLinkUpdate) -> Optional[LinkOut]:
        link = await self.repo.get_link(link_id)
        if not link:
            return None
        link = await self.repo.update_link(link, payload.title, payload.url)
        await self.activity.record(
            admin_id, ActivityAction.update, entity_type="link", entity_id=link.id, metadata={"title": link.title}
        )
        return LinkOut.model_validate(link)

    async def delete_links(self, admin_id: UUID, ids: Iterable[UUID]) -> int:
        ids = list(dict.fromkeys(ids))
        deleted = await self.repo.delete_links(ids)
        if deleted:
            logger.info("Admin %s deleted %d link(s)", admin_id, deleted)
            await self.activity.record(
                admin_id,
                ActivityAction.delete,
                entity_type="link",
                entity_id=ids[0] if len(ids) == 1 else None,
                metadata={"count": deleted},
            )
        return deleted

    async def list_activity(self, q: Optional[str] = None, limit: int = 100) -> List[ActivityLogOut]:
        return await self.activity.list_recent(q=q, limit=limit)
