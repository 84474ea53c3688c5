from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from app.core.auth import get_current_user
from activity.services.activity_service import ActivityService
from links.domain.entities.link import LinkCreate, LinkOut, LinkUpdate
from links.domain.repositories.link_repository import LinkRepository
from links.services.link_service import LinkService
from shared.wiring import get_activity_service

router = APIRouter(prefix="/v1/links", tags=["links"])

def get_link_service(
    db: AsyncSession = Depends(get_session),
    activity: ActivityService = Depends(get_activity_service),
) -> LinkService:
    return LinkService(LinkRepository(db), activity)


@router.post("", summary="Save a link", response_model=LinkOut, status_code=status.HTTP_201_CREATED)
async def create_link(
    payload: LinkCreate,
    user=Depends(get_current_user),
    svc: LinkService = Depends(get_link_service),
):
    return await svc.create(user.id, payload)


@router.get("", summary="List my links", description="Newest first; `q` matches title or URL.", response_model=List[LinkOut])
async def list_links(
    q: Optional[str] = Query(None, description="Case-insensitive match on title or URL."),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    user=Depends(get_current_user),
    svc: LinkService = Depends(get_link_service),
):
    return await svc.list(user.id, q, limit, offset)


@router.get("/{link_id}", summary="Get one of my links", response_model=LinkOut, responses={404: {"description": "Link not found."}})
async def get_link(
    link_id: UUID = Path(..., description="Link UUID"),
    user=Depends(get_current_user),
    svc: LinkService = Depends(get_link_service),
):
    obj = await svc.get(user.id, link_id)
    if not obj:
        raise HTTPException(status_code=404, detail="not_found")
    return obj


@router.patch("/{link_id}", summary="Update one of my links", response_model=LinkOut, responses={404: {"description": "Link not found."}})
async def update_link(
    payload: LinkUpdate,
    link_id: UUID = Path(..., description="Link UUID"),
    user=Depends(get_current_user),
    svc: LinkService = Depends(get_link_service),
):
    obj = await svc.update(user.id, link_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="not_found")
    return obj


@router.delete(
    "/{link_id}",
    summary="Delete one of my links",
    responses={200: {"content": {"application/json": {"example": {"ok": True}}}}, 404: {"description": "Link not found."}},
)
async def delete_link(
    link_id: UUID = Path(..., description="Link UUID"),
    user=Depends(get_current_user),
    svc: LinkService = Depends(get_link_service),
):
    ok = await svc.delete(user.id, link_id)
    if not ok:
        raise HTTPException(status_code=404, detail="not_found")
    return {"ok": True}
