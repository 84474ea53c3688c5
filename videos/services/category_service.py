import logging
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from shared.exceptions import ConflictError
from videos.domain.entities.category import CategoryCreate, CategoryOut, CategoryUpdate, DEFAULT_CATEGORIES
from videos.domain.repositories.category_repository import CategoryRepository
from videos.domain.repositories.video_repository import VideoRepository
from videos.ports.outbound.cache_port import CachePort
from videos.services.video_service import ck_video

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Per-user categories. A user who has never had any gets the default
    set on first listing; deleting a category un-tags its videos and
    evicts their cached items.
    """

    def __init__(self, repo: CategoryRepository, videos_repo: VideoRepository, cache_port: CachePort):
        self.repo = repo
        self.videos_repo = videos_repo
        self.cache = cache_port

    async def list(self, owner_id: UUID) -> Sequence[CategoryOut]:
        if await self.repo.count(owner_id) == 0:
            try:
                await self.repo.seed(owner_id, DEFAULT_CATEGORIES)
            except IntegrityError:
                # a parallel first listing seeded them already
                await self.repo.db.rollback()
                logger.info("Default categories for %s already seeded", owner_id)
        rows = await self.repo.list(owner_id)
        return [CategoryOut.model_validate(r) for r in rows]

    async def create(self, owner_id: UUID, payload: CategoryCreate) -> CategoryOut:
        if await self.repo.get_by_name(owner_id, payload.name):
            raise ConflictError("category_exists")
        try:
            obj = await self.repo.insert(owner_id, payload)
        except IntegrityError:
            await self.repo.db.rollback()
            raise ConflictError("category_exists")
        return CategoryOut.model_validate(obj)

    async def update(self, owner_id: UUID, category_id: UUID, payload: CategoryUpdate) -> Optional[CategoryOut]:
        if payload.name:
            clash = await self.repo.get_by_name(owner_id, payload.name)
            if clash and clash.id != category_id:
                raise ConflictError("category_exists")
        obj = await self.repo.update(owner_id, category_id, payload)
        return CategoryOut.model_validate(obj) if obj else None

    async def delete(self, owner_id: UUID, category_id: UUID) -> bool:
        if not await self.repo.get(owner_id, category_id):
            return False
        video_ids = await self.videos_repo.clear_category(owner_id, category_id)
        ok = await self.repo.delete(owner_id, category_id)
        if video_ids:
            await self.cache.delete_keys(*(ck_video(owner_id, vid) for vid in video_ids))
        return ok
