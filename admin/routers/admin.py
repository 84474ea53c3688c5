from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from app.core.auth import require_admin
from activity.domain.entities.activity import ActivityLogOut
from activity.services.activity_service import ActivityService
from admin.entities.admin import AdminLinkOut, AdminLinkUpdate, AdminVideoOut, BulkDeleteIn, BulkDeleteOut
from admin.repositories.admin_repository import AdminRepository
from admin.services.admin_service import AdminService
from links.domain.entities.link import LinkOut
from shared.wiring import get_activity_service

router = APIRouter(
    prefix="/v1/admin",
    tags=["admin"],
    responses={
        401: {"description": "Not authenticated."},
        403: {
            "description": "Authenticated but not authorized (admin required).",
            "content": {"application/json": {"examples": {"forbidden": {"value": {"detail": "forbidden"}}}}},
        },
    },
)

def get_admin_service(
    db: AsyncSession = Depends(get_session),
    activity: ActivityService = Depends(get_activity_service),
) -> AdminService:
    return AdminService(AdminRepository(db), activity)


@router.get(
    "/links",
    summary="List every user's links",
    description="`q` matches title, URL, owner email or owner display name (case-insensitive).",
    response_model=List[AdminLinkOut],
)
async def list_links(
    q: Optional[str] = Query(None, description="Search term."),
    admin=Depends(require_admin),
    svc: AdminService = Depends(get_admin_service),
):
    return await svc.list_links(q)


@router.patch(
    "/links/{link_id}",
    summary="Edit any user's link",
    response_model=LinkOut,
    responses={404: {"description": "Link not found."}},
)
async def update_link(
    payload: AdminLinkUpdate,
    link_id: UUID = Path(..., description="Link UUID"),
    admin=Depends(require_admin),
    svc: AdminService = Depends(get_admin_service),
):
    obj = await svc.update_link(admin.id, link_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="not_found")
    return obj


@router.delete(
    "/links/{link_id}",
    summary="Delete any user's link",
    responses={200: {"content": {"application/json": {"example": {"ok": True}}}}, 404: {"description": "Link not found."}},
)
async def delete_link(
    link_id: UUID = Path(..., description="Link UUID"),
    admin=Depends(require_admin),
    svc: AdminService = Depends(get_admin_service),
):
    if not await svc.delete_links(admin.id, [link_id]):
        raise HTTPException(status_code=404, detail="not_found")
    return {"ok": True}


@router.post(
    "/links/bulk-delete",
    summary="Delete several links at once",
    description="Unknown ids are ignored; `deleted` is the number of rows removed.",
    response_model=BulkDeleteOut,
)
async def bulk_delete_links(
    payload: BulkDeleteIn,
    admin=Depends(require_admin),
    svc: AdminService = Depends(get_admin_service),
):
    return BulkDeleteOut(deleted=await svc.delete_links(admin.id, payload.ids))


@router.get(
    "/videos",
    summary="List every user's videos",
    description="`q` matches title, URL, owner email or owner display name (case-insensitive).",
    response_model=List[AdminVideoOut],
)
async def list_videos(
    q: Optional[str] = Query(None, description="Search term."),
    admin=Depends(require_admin),
    svc: AdminService = Depends(get_admin_service),
):
    return await svc.list_videos(q)


@router.get(
    "/activity",
    summary="Browse the activity log",
    description=(
        "Newest first. `q` matches action, entity type, user email or display name. "
        "Entries of deleted users show `user_email: \"Unknown\"`."
    ),
    response_model=List[ActivityLogOut],
)
async def list_activity(
    q: Optional[str] = Query(None, description="Search term."),
    limit: int = Query(100, ge=1, le=500, description="Maximum number of entries."),
    admin=Depends(require_admin),
    svc: AdminService = Depends(get_admin_service),
):
    return await svc.list_activity(q, limit)
