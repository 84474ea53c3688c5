from pydantic import BaseModel, EmailStr, constr
from uuid import UUID
from datetime import datetime
from typing import List, Optional
from .role import RoleLiteral

class UserCreate(BaseModel):
    email: EmailStr
    password: constr(min_length=8)
    display_name: Optional[constr(strip_whitespace=True, max_length=100)] = None
    roles: List[RoleLiteral] = ["user"]

class UserOut(BaseModel):
    id: UUID
    email: EmailStr
    display_name: Optional[str] = None
    is_active: bool
    roles: List[RoleLiteral]
    created_at: datetime

    @classmethod
    def from_user(cls, user) -> "UserOut":
        return cls(
            id=user.id,
            email=user.email,
            display_name=user.display_name,
            is_active=user.is_active,
            roles=user.role_names,
            created_at=user.created_at,
        )

class ProfileUpdate(BaseModel):
    display_name: constr(strip_whitespace=True, min_length=1, max_length=100)

class ProfileStatsOut(BaseModel):
    videos: int
    links: int
