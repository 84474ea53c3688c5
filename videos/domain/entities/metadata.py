from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from videos.domain.platforms import Platform


class VideoMetadata(BaseModel):
    title: str = ""
    channel_name: str = ""
    channel_url: str = ""
    thumbnail_url: str = ""


class ResolutionStatus(str, Enum):
    resolved = "resolved"        # oEmbed answered
    unavailable = "unavailable"  # platform has no token-free metadata; title must be entered manually
    failed = "failed"            # network error, non-200 or bad JSON


class MetadataResolution(BaseModel):
    status: ResolutionStatus
    platform: Platform
    video_id: Optional[str] = None
    metadata: Optional[VideoMetadata] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ResolutionStatus.resolved

    @classmethod
    def resolved(cls, platform: Platform, video_id: Optional[str], metadata: VideoMetadata) -> "MetadataResolution":
        return cls(status=ResolutionStatus.resolved, platform=platform, video_id=video_id, metadata=metadata)

    @classmethod
    def unavailable(cls, platform: Platform, video_id: Optional[str], placeholder: str) -> "MetadataResolution":
        return cls(
            status=ResolutionStatus.unavailable,
            platform=platform,
            video_id=video_id,
            metadata=VideoMetadata(thumbnail_url=placeholder),
        )

    @classmethod
    def failed(cls, platform: Platform, video_id: Optional[str], error: str) -> "MetadataResolution":
        return cls(status=ResolutionStatus.failed, platform=platform, video_id=video_id, error=error)
