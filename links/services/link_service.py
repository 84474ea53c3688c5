from typing import Optional, Sequence
from uuid import UUID

from activity.domain.models.activity_log import ActivityAction
from activity.services.activity_service import ActivityService
from links.domain.entities.link import LinkCreate, LinkOut, LinkUpdate
from links.domain.repositories.link_repository import LinkRepository


class LinkService:
    def __init__(self, repo: LinkRepository, activity: ActivityService):
        self.repo = repo
        self.activity = activity

    async def create(self, owner_id: UUID, payload: LinkCreate) -> LinkOut:
        obj = await self.repo.insert(owner_id, payload)
        await self.activity.record(
            owner_id, ActivityAction.create, entity_type="link", entity_id=obj.id, metadata={"title": obj.title}
        )
        return LinkOut.model_validate(obj)

    async def update(self, owner_id: UUID, link_id: UUID, payload: LinkUpdate) -> Optional[LinkOut]:
        obj = await self.repo.update(owner_id, link_id, payload)
        if not obj:
            return None
        await self.activity.record(
            owner_id, ActivityAction.update, entity_type="link", entity_id=obj.id, metadata={"title": obj.title}
        )
        return LinkOut.model_validate(obj)

    async def delete(self, owner_id: UUID, link_id: UUID) -> bool:
        ok = await self.repo.delete(owner_id, link_id)
        if ok:
            await self.activity.record(owner_id, ActivityAction.delete, entity_type="link", entity_id=link_id)
        return ok

    async def get(self, owner_id: UUID, link_id: UUID) -> Optional[LinkOut]:
        obj = await self.repo.get(owner_id, link_id)
        return LinkOut.model_validate(obj) if obj else None

    async def list(self, owner_id: UUID, q: Optional[str], limit: int, offset: int) -> Sequence[LinkOut]:
        rows = await self.repo.list(owner_id, q=q, limit=limit, offset=offset)
        return [LinkOut.model_validate(r) for r in rows]
