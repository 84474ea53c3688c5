from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from videos.domain import platforms
from videos.domain.platforms import Platform
from videos.domain.entities.metadata import ResolutionStatus, VideoMetadata

UNTITLED_VIDEO = "Untitled Video"


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class VideoUrlIn(BaseModel):
    url: str = Field(..., min_length=1, max_length=2048)

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("url must not be blank")
        return v


class VideoCreate(VideoUrlIn):
    # Overrides for whatever the resolver found; blank means "use resolved value"
    title: Optional[str] = Field(default=None, max_length=500)
    channel_name: Optional[str] = Field(default=None, max_length=255)
    channel_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    category_id: Optional[UUID] = None

    @field_validator("title", "channel_name", "channel_url", "thumbnail_url")
    @classmethod
    def blank_overrides(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class VideoUpdate(BaseModel):
    url: Optional[str] = Field(default=None, min_length=1, max_length=2048)
    title: Optional[str] = Field(default=None, max_length=500)
    channel_name: Optional[str] = Field(default=None, max_length=255)
    channel_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    category_id: Optional[UUID] = None

    @field_validator("url")
    @classmethod
    def strip_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("url must not be blank")
        return v

    @field_validator("channel_name", "channel_url", "thumbnail_url")
    @classmethod
    def blank_fields(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Never Gonna Give You Up (Live)",
                "category_id": "0b8d5d0c-43f3-4c3b-9a7e-1f8f0cf4b6a2",
            }
        }
    }


class VideoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    url: str
    platform: Platform
    video_id: Optional[str] = None
    title: str
    channel_name: Optional[str] = None
    channel_url: Optional[str] = None
    thumbnail_url: str
    category_id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def watch_url(self) -> Optional[str]:
        """Canonical YouTube link; Facebook rows keep their saved URL only."""
        if self.platform == Platform.youtube and self.video_id:
            return platforms.watch_url(self.video_id)
        return None


class VideoCreatedOut(VideoOut):
    # lets the client tell "enter a title manually" apart from "could not fetch"
    metadata_status: Optional[ResolutionStatus] = None


class VideoResolveOut(BaseModel):
    url: str
    platform: Platform
    video_id: Optional[str] = None
    recognized: bool
    thumbnail_url: str
    metadata_status: ResolutionStatus
    metadata: Optional[VideoMetadata] = None


class PlatformCountsOut(BaseModel):
    all: int = 0
    youtube: int = 0
    facebook: int = 0
