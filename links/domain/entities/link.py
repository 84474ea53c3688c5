from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

Title = constr(strip_whitespace=True, min_length=1, max_length=500)
Url = constr(strip_whitespace=True, min_length=1, max_length=2048)


def _clean_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    if tags is None:
        return None
    # keep first occurrence order, drop blanks
    return list(dict.fromkeys(t.strip() for t in tags if t and t.strip()))


class LinkCreate(BaseModel):
    title: Title
    url: Url
    favicon: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: List[str]) -> List[str]:
        return _clean_tags(v)


class LinkUpdate(BaseModel):
    title: Optional[Title] = None
    url: Optional[Url] = None
    favicon: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_tags(v)


class LinkOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    url: str
    favicon: Optional[str] = None
    tags: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
