from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, constr

from links.domain.entities.link import LinkOut
from videos.domain.entities.video import VideoOut


class AdminLinkOut(LinkOut):
    user_id: UUID
    user_email: str
    user_name: Optional[str] = None


class AdminVideoOut(VideoOut):
    user_id: UUID
    user_email: str
    user_name: Optional[str] = None


class AdminLinkUpdate(BaseModel):
    title: Optional[constr(strip_whitespace=True, min_length=1, max_length=500)] = None
    url: Optional[constr(strip_whitespace=True, min_length=1, max_length=2048)] = None


class BulkDeleteIn(BaseModel):
    ids: List[UUID] = Field(..., min_length=1, max_length=500)


class BulkDeleteOut(BaseModel):
    deleted: int
