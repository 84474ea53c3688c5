import logging
from typing import Optional, Sequence
from uuid import UUID

from app.core.config import settings
from activity.domain.models.activity_log import ActivityAction
from activity.services.activity_service import ActivityService
from shared.exceptions import NotFoundError, UnsupportedUrlError
from videos.domain import platforms
from videos.domain.platforms import Platform
from videos.domain.entities.metadata import MetadataResolution, ResolutionStatus
from videos.domain.entities.video import (
    UNTITLED_VIDEO,
    PlatformCountsOut,
    VideoCreate,
    VideoCreatedOut,
    VideoOut,
    VideoResolveOut,
    VideoUpdate,
)
from videos.domain.repositories.category_repository import CategoryRepository
from videos.domain.repositories.video_repository import VideoRepository
from videos.ports.outbound.cache_port import CachePort
from videos.ports.outbound.metadata_port import MetadataResolverPort

logger = logging.getLogger(__name__)

def ck_video(owner_id: UUID, vid: UUID) -> str: return f"vid:item:{owner_id}:{vid}"


class VideoService:
    """
    Video entries of one user.

    The URL is checked with the classifier before anything is persisted or
    fetched. Metadata comes from the resolver, caller-supplied fields win,
    and anything still missing falls back to the derived thumbnail and a
    fixed title. Single items are cached write-through; lists are not cached.
    """

    def __init__(
        self,
        repo: VideoRepository,
        categories_repo: CategoryRepository,
        resolver: MetadataResolverPort,
        cache_port: CachePort,
        activity: ActivityService,
    ):
        self.repo = repo
        self.categories_repo = categories_repo
        self.resolver = resolver
        self.cache = cache_port
        self.activity = activity

    # ---------- Preview ----------

    async def preview(self, url: str) -> VideoResolveOut:
        platform, video_id = platforms.match(url)
        if platform is Platform.unknown:
            raise UnsupportedUrlError()

        resolution = await self.resolver.resolve(url)
        return VideoResolveOut(
            url=url,
            platform=platform,
            video_id=video_id,
            recognized=True,
            thumbnail_url=_thumbnail(url, platform, video_id, resolution),
            metadata_status=resolution.status if resolution else ResolutionStatus.failed,
            metadata=resolution.metadata if resolution else None,
        )

    # ---------- Mutations ----------

    async def create(self, owner_id: UUID, payload: VideoCreate) -> VideoCreatedOut:
        platform, video_id = platforms.match(payload.url)
        if platform is Platform.unknown:
            raise UnsupportedUrlError()
        if payload.category_id and not await self.categories_repo.get(owner_id, payload.category_id):
            raise NotFoundError("category_not_found")

        resolution = await self.resolver.resolve(payload.url)
        if resolution and not resolution.ok:
            logger.info(
                "No metadata for %s (%s); using fallbacks", payload.url, resolution.error or resolution.status.value
            )
        resolved = resolution.metadata if resolution and resolution.metadata else None

        obj = await self.repo.insert(
            owner_id,
            {
                "url": payload.url,
                "platform": platform,
                "video_id": video_id,
                "title": payload.title or (resolved.title if resolved else "") or UNTITLED_VIDEO,
                "channel_name": payload.channel_name or (resolved.channel_name if resolved else None) or None,
                "channel_url": payload.channel_url or (resolved.channel_url if resolved else None) or None,
                "thumbnail_url": payload.thumbnail_url or _thumbnail(payload.url, platform, video_id, resolution),
                "category_id": payload.category_id,
            },
        )
        dto = VideoOut.model_validate(obj)
        await self.cache.set(ck_video(owner_id, obj.id), dto.model_dump(mode="json"), ttl=settings.cache_ttl_seconds)
        await self.activity.record(
            owner_id,
            ActivityAction.create,
            entity_type="video",
            entity_id=obj.id,
            metadata={"title": obj.title, "platform": platform.value},
        )
        return VideoCreatedOut(
            **dto.model_dump(),
            metadata_status=resolution.status if resolution else None,
        )

    async def update(self, owner_id: UUID, video_id: UUID, payload: VideoUpdate) -> Optional[VideoOut]:
        data = payload.model_dump(exclude_unset=True)

        if "thumbnail_url" in data and not data["thumbnail_url"]:
            data.pop("thumbnail_url")

        if data.get("url"):
            platform, platform_id = platforms.match(data["url"])
            if platform is Platform.unknown:
                raise UnsupportedUrlError()
            data["platform"] = platform
            data["video_id"] = platform_id
            # the old thumbnail belongs to the old video
            data.setdefault(
                "thumbnail_url",
                platforms.derive_thumbnail(data["url"], platform, platform_id, settings.thumbnail_placeholder),
            )
        else:
            data.pop("url", None)

        if "title" in data:
            data["title"] = (data["title"] or "").strip() or UNTITLED_VIDEO
        if data.get("category_id") and not await self.categories_repo.get(owner_id, data["category_id"]):
            raise NotFoundError("category_not_found")

        obj = await self.repo.update(owner_id, video_id, data)
        if not obj:
            return None

        dto = VideoOut.model_validate(obj)
        await self.cache.set(ck_video(owner_id, obj.id), dto.model_dump(mode="json"), ttl=settings.cache_ttl_seconds)
        await self.activity.record(
            owner_id, ActivityAction.update, entity_type="video", entity_id=obj.id, metadata={"title": obj.title}
        )
        return dto

    async def delete(self, owner_id: UUID, video_id: UUID) -> bool:
        ok = await self.repo.delete(owner_id, video_id)
        if ok:
            await self.cache.delete_keys(ck_video(owner_id, video_id))
            await self.activity.record(owner_id, ActivityAction.delete, entity_type="video", entity_id=video_id)
        return ok

    # ---------- Queries ----------

    async def get(self, owner_id: UUID, video_id: UUID) -> Optional[VideoOut]:
        cached = await self.cache.get(ck_video(owner_id, video_id))
        if cached:
            # cached is already a dict from the adapter; no json.loads
            return VideoOut.model_validate(cached)

        obj = await self.repo.get(owner_id, video_id)
        if not obj:
            return None
        dto = VideoOut.model_validate(obj)
        await self.cache.set(ck_video(owner_id, video_id), dto.model_dump(mode="json"), ttl=settings.cache_ttl_seconds)
        return dto

    async def list(
        self,
        owner_id: UUID,
        category_id: Optional[UUID],
        platform: Optional[Platform],
        q: Optional[str],
        limit: int,
        offset: int,
    ) -> Sequence[VideoOut]:
        rows = await self.repo.list(
            owner_id,
            category_id=category_id,
            platform=platform,
            q=q,
            limit=limit,
            offset=offset,
        )
        return [VideoOut.model_validate(r) for r in rows]

    async def platform_counts(self, owner_id: UUID) -> PlatformCountsOut:
        counts = await self.repo.count_by_platform(owner_id)
        return PlatformCountsOut(
            all=sum(counts.values()),
            youtube=counts.get(Platform.youtube, 0),
            facebook=counts.get(Platform.facebook, 0),
        )


# --- local helper ---
def _thumbnail(
    url: str, platform: Platform, video_id: Optional[str], resolution: Optional[MetadataResolution]
) -> str:
    if resolution and resolution.metadata and resolution.metadata.thumbnail_url:
        return resolution.metadata.thumbnail_url
    # fetch failed: derive locally, no network
    return platforms.derive_thumbnail(url, platform, video_id, settings.thumbnail_placeholder)
