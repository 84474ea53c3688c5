from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database.db import get_session
from app.core.auth import get_current_user
from shared.exceptions import ConflictError
from shared.wiring import get_cache
from videos.domain.entities.category import CategoryCreate, CategoryOut, CategoryUpdate
from videos.domain.repositories import CategoryRepository, VideoRepository
from videos.ports.outbound.cache_port import CachePort
from videos.services.category_service import CategoryService

router = APIRouter(prefix="/v1/categories", tags=["categories"])

def get_category_service(
    db: AsyncSession = Depends(get_session),
    cache: CachePort = Depends(get_cache),
) -> CategoryService:
    return CategoryService(CategoryRepository(db), VideoRepository(db), cache_port=cache)

CONFLICT = {
    "description": "A category with this name already exists.",
    "content": {"application/json": {"example": {"detail": "category_exists"}}},
}


@router.get(
    "",
    summary="List my categories",
    description="Ordered by name. The first call for a user without categories creates Music, Education and Entertainment.",
    response_model=List[CategoryOut],
)
async def list_categories(
    user=Depends(get_current_user),
    svc: CategoryService = Depends(get_category_service),
):
    return await svc.list(user.id)


@router.post(
    "",
    summary="Create a category",
    description="`color` is an HSL triple such as `340 82% 52%`.",
    response_model=CategoryOut,
    status_code=status.HTTP_201_CREATED,
    responses={409: CONFLICT},
)
async def create_category(
    payload: CategoryCreate,
    user=Depends(get_current_user),
    svc: CategoryService = Depends(get_category_service),
):
    try:
        return await svc.create(user.id, payload)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.detail)


@router.patch(
    "/{category_id}",
    summary="Rename or recolor a category",
    response_model=CategoryOut,
    responses={404: {"description": "Category not found."}, 409: CONFLICT},
)
async def update_category(
    payload: CategoryUpdate,
    category_id: UUID = Path(..., description="Category UUID"),
    user=Depends(get_current_user),
    svc: CategoryService = Depends(get_category_service),
):
    try:
        obj = await svc.update(user.id, category_id, payload)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.detail)
    if not obj:
        raise HTTPException(status_code=404, detail="not_found")
    return obj


@router.delete(
    "/{category_id}",
    summary="Delete a category",
    description="Videos tagged with it keep existing and lose the tag.",
    responses={
        200: {"content": {"application/json": {"example": {"ok": True}}}},
        404: {"description": "Category not found."},
    },
)
async def delete_category(
    category_id: UUID = Path(..., description="Category UUID"),
    user=Depends(get_current_user),
    svc: CategoryService = Depends(get_category_service),
):
    ok = await svc.delete(user.id, category_id)
    if not ok:
        raise HTTPException(status_code=404, detail="not_found")
    return {"ok": True}
