from pydantic import BaseModel, ConfigDict
from typing import Literal
from uuid import UUID
from datetime import datetime

RoleLiteral = Literal["admin", "user"]

class RoleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: RoleLiteral
    created_at: datetime

class AssignRoleIn(BaseModel):
    role: RoleLiteral
