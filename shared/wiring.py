from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from activity.domain.repositories.activity_repository import ActivityRepository
from activity.services.activity_service import ActivityService
from videos.adapters.outbound.cache_redis import RedisCacheAdapter
from videos.adapters.outbound.oembed_resolver import OEmbedMetadataResolver
from videos.ports.outbound.cache_port import CachePort
from videos.ports.outbound.metadata_port import MetadataResolverPort


def get_cache() -> CachePort:
    return RedisCacheAdapter()

def get_metadata_resolver() -> MetadataResolverPort:
    return OEmbedMetadataResolver()

def get_activity_service(db: AsyncSession = Depends(get_session)) -> ActivityService:
    """Shares the request's session with the repositories of the calling router."""
    return ActivityService(ActivityRepository(db))
