from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from app.core.auth import require_admin
from users.entities.role import RoleOut
from users.repositories.role_repository import RoleRepository
from users.services.role_service import RoleService

router = APIRouter(
    prefix="/v1/roles",
    tags=["roles"],
    dependencies=[Depends(require_admin)],  # Admin-only access
)

def get_role_service(db: AsyncSession = Depends(get_session)) -> RoleService:
    return RoleService(RoleRepository(db))

@router.get(
    "",
    summary="List roles (admin only)",
    response_model=List[RoleOut],
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {"id": "8c6a3a45-2e6c-4a1a-8d8b-9c7f2b0d7a21", "name": "admin", "created_at": "2025-08-10T12:34:56Z"},
                        {"id": "b0efc8b8-1df4-41cf-8b20-0a3f7e0f92d3", "name": "user", "created_at": "2025-08-10T12:35:12Z"},
                    ]
                }
            }
        },
        403: {"description": "Authenticated but not authorized (admin required)."},
    },
)
async def list_roles(svc: RoleService = Depends(get_role_service)):
    return [RoleOut(id=r.id, name=r.name.value, created_at=r.created_at) for r in await svc.list_all()]
