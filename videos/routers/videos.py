from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from app.core.auth import get_current_user
from activity.services.activity_service import ActivityService
from shared.exceptions import NotFoundError, UnsupportedUrlError
from shared.wiring import get_activity_service, get_cache, get_metadata_resolver
from videos.domain.platforms import Platform
from videos.domain.entities.video import (
    PlatformCountsOut,
    VideoCreate,
    VideoCreatedOut,
    VideoOut,
    VideoResolveOut,
    VideoUpdate,
    VideoUrlIn,
)
from videos.domain.repositories import CategoryRepository, VideoRepository
from videos.ports.outbound.cache_port import CachePort
from videos.ports.outbound.metadata_port import MetadataResolverPort
from videos.services.video_service import VideoService

router = APIRouter(
    prefix="/v1/videos",
    tags=["videos"],
    responses={401: {"description": "Not authenticated."}},
)

async def get_video_service(
    db: AsyncSession = Depends(get_session),
    cache: CachePort = Depends(get_cache),
    resolver: MetadataResolverPort = Depends(get_metadata_resolver),
    activity: ActivityService = Depends(get_activity_service),
) -> VideoService:
    return VideoService(
        VideoRepository(db),
        CategoryRepository(db),
        resolver=resolver,
        cache_port=cache,
        activity=activity,
    )

UNSUPPORTED_URL = {
    "description": "Not a recognized YouTube or Facebook video URL.",
    "content": {"application/json": {"examples": {"unsupported": {"value": {"detail": "unsupported_url"}}}}},
}


@router.post(
    "/resolve",
    summary="Preview a video URL",
    description=(
        "Classifies the URL, extracts the platform video id and resolves display metadata.\n\n"
        "- YouTube: one oEmbed call; `metadata_status` is `resolved` or `failed`.\n"
        "- Facebook: no call is made; `metadata_status` is `unavailable` and the title must be entered manually.\n"
        "Nothing is stored."
    ),
    response_model=VideoResolveOut,
    responses={
        200: {
            "description": "Classification and metadata.",
            "content": {
                "application/json": {
                    "examples": {
                        "youtube": {
                            "summary": "Resolved YouTube URL",
                            "value": {
                                "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                                "platform": "youtube",
                                "video_id": "dQw4w9WgXcQ",
                                "recognized": True,
                                "thumbnail_url": "https://img.youtube.com/vi/dQw4w9WgXcQ/mqdefault.jpg",
                                "metadata_status": "resolved",
                                "metadata": {
                                    "title": "Rick Astley - Never Gonna Give You Up",
                                    "channel_name": "Rick Astley",
                                    "channel_url": "https://www.youtube.com/@RickAstleyYT",
                                    "thumbnail_url": "https://img.youtube.com/vi/dQw4w9WgXcQ/mqdefault.jpg",
                                },
                            },
                        }
                    }
                }
            },
        },
        400: UNSUPPORTED_URL,
    },
)
async def resolve_video(
    body: VideoUrlIn,
    user=Depends(get_current_user),
    svc: VideoService = Depends(get_video_service),
):
    try:
        return await svc.preview(body.url)
    except UnsupportedUrlError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)


@router.post(
    "",
    summary="Save a video",
    description=(
        "Saves a YouTube or Facebook video for the current user.\n\n"
        "Fields given in the body override resolved metadata. Missing values fall back to the "
        "derived thumbnail and the title `Untitled Video`. `metadata_status` tells the client "
        "whether the title came from the platform (`resolved`), must be typed in (`unavailable`) "
        "or could not be fetched (`failed`)."
    ),
    response_model=VideoCreatedOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Video saved."},
        400: UNSUPPORTED_URL,
        404: {"description": "Category not found.", "content": {"application/json": {"example": {"detail": "category_not_found"}}}},
        422: {"description": "Validation error (e.g. empty URL)."},
    },
)
async def create_video(
    payload: VideoCreate,
    user=Depends(get_current_user),
    svc: VideoService = Depends(get_video_service),
):
    try:
        return await svc.create(user.id, payload)
    except UnsupportedUrlError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)


@router.get(
    "",
    summary="List my videos",
    description="Newest first. Filter by category, platform or a title/channel search.",
    response_model=List[VideoOut],
)
async def list_videos(
    category_id: Optional[UUID] = Query(None, description="Only videos tagged with this category."),
    platform: Optional[Platform] = Query(None, description="`youtube` or `facebook`."),
    q: Optional[str] = Query(None, description="Case-insensitive match on title or channel."),
    limit: int = Query(50, ge=1, le=200, description="Page size (1–200)."),
    offset: int = Query(0, ge=0, description="Offset for pagination."),
    user=Depends(get_current_user),
    svc: VideoService = Depends(get_video_service),
):
    return await svc.list(user.id, category_id, platform, q, limit, offset)


@router.get(
    "/platform-counts",
    summary="Count my videos per platform",
    response_model=PlatformCountsOut,
    responses={200: {"content": {"application/json": {"example": {"all": 5, "youtube": 4, "facebook": 1}}}}},
)
async def platform_counts(
    user=Depends(get_current_user),
    svc: VideoService = Depends(get_video_service),
):
    return await svc.platform_counts(user.id)


@router.get(
    "/{video_id}",
    summary="Get one of my videos",
    response_model=VideoOut,
    responses={404: {"description": "Video not found."}},
)
async def get_video(
    video_id: UUID = Path(..., description="Video UUID"),
    user=Depends(get_current_user),
    svc: VideoService = Depends(get_video_service),
):
    obj = await svc.get(user.id, video_id)
    if not obj:
        raise HTTPException(status_code=404, detail="not_found")
    return obj


@router.patch(
    "/{video_id}",
    summary="Update one of my videos",
    description="Partial update. A new `url` is re-classified; `category_id: null` removes the category.",
    response_model=VideoOut,
    responses={400: UNSUPPORTED_URL, 404: {"description": "Video or category not found."}},
)
async def update_video(
    video_id: UUID = Path(..., description="Video UUID"),
    payload: VideoUpdate = Body(..., description="Partial update payload"),
    user=Depends(get_current_user),
    svc: VideoService = Depends(get_video_service),
):
    try:
        obj = await svc.update(user.id, video_id, payload)
    except UnsupportedUrlError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.detail)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)
    if not obj:
        raise HTTPException(status_code=404, detail="not_found")
    return obj


@router.delete(
    "/{video_id}",
    summary="Delete one of my videos",
    description="Returns `{ \"ok\": true }` on success.",
    responses={
        200: {"content": {"application/json": {"example": {"ok": True}}}},
        404: {"description": "Video not found."},
    },
)
async def delete_video(
    video_id: UUID = Path(..., description="Video UUID"),
    user=Depends(get_current_user),
    svc: VideoService = Depends(get_video_service),
):
    ok = await svc.delete(user.id, video_id)
    if not ok:
        raise HTTPException(status_code=404, detail="not_found")
    return {"ok": True}
