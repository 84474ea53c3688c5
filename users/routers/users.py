from fastapi import APIRouter, Depends, HTTPException, status, Path, Body
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID
from app.core.database.db import get_session
from app.core.auth import require_admin, get_current_user
from activity.services.activity_service import ActivityService
from links.domain.repositories.link_repository import LinkRepository
from shared.exceptions import ConflictError
from shared.wiring import get_activity_service
from users.entities.user import UserCreate, UserOut, ProfileUpdate, ProfileStatsOut
from users.entities.role import AssignRoleIn
from users.repositories.role_repository import RoleRepository
from users.repositories.user_repository import UserRepository
from users.services.user_service import UserService
from users.services.profile_service import ProfileService
from videos.domain.repositories.video_repository import VideoRepository

router = APIRouter(prefix="/v1/users", tags=["users"])

def get_user_service(db: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(UserRepository(db=db), RoleRepository(db=db))

def get_profile_service(
    db: AsyncSession = Depends(get_session),
    activity: ActivityService = Depends(get_activity_service),
) -> ProfileService:
    return ProfileService(UserRepository(db), VideoRepository(db), LinkRepository(db), activity)

USER_EXAMPLE = {
    "id": "5d2a8c1f-6c53-4b1a-9f9a-c5f1f3e3c0d1",
    "email": "sam@example.com",
    "display_name": "Sam",
    "is_active": True,
    "roles": ["user"],
    "created_at": "2025-08-14T20:30:15Z",
}

@router.post(
    "",
    summary="Create a new user (admin only)",
    description=(
        "Creates a new user and returns the created record.\n\n"
        "### Notes\n"
        "- **Admin** permissions are required (enforced by `require_admin`).\n"
        "- The returned `roles` field is an array of role names.\n"
    ),
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
    responses={
        201: {"description": "User successfully created.", "content": {"application/json": {"example": USER_EXAMPLE}}},
        403: {
            "description": "Authenticated but not authorized (admin required).",
            "content": {"application/json": {"examples": {"forbidden": {"summary": "Not admin", "value": {"detail": "forbidden"}}}}},
        },
        409: {
            "description": "Email already exists.",
            "content": {"application/json": {"examples": {"conflict": {"value": {"detail": "email_exists"}}}}},
        },
    },
)
async def create_user(payload: UserCreate, svc: UserService = Depends(get_user_service)):
    """
    **Admin-only** user creation.

    **Errors**
    - `401` Not authenticated
    - `403` Not authorized
    - `409` Email already exists
    - `422` Validation error
    """
    try:
        user = await svc.create(payload)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.detail)
    return UserOut.from_user(user)

@router.get(
    "/me",
    summary="Get my profile",
    description="Returns the authenticated user's profile. Requires a valid `Authorization: Bearer <token>` header.",
    response_model=UserOut,
    responses={200: {"content": {"application/json": {"example": USER_EXAMPLE}}}},
)
async def me(user=Depends(get_current_user)):
    return UserOut.from_user(user)

@router.patch(
    "/me",
    summary="Update my display name",
    description="The name is trimmed and must be 1–100 characters. The change is written to the activity log.",
    response_model=UserOut,
    responses={422: {"description": "Display name empty or too long."}},
)
async def update_me(
    payload: ProfileUpdate,
    user=Depends(get_current_user),
    svc: ProfileService = Depends(get_profile_service),
):
    user = await svc.update_display_name(user, payload.display_name)
    return UserOut.from_user(user)

@router.get(
    "/me/stats",
    summary="Count my saved videos and links",
    response_model=ProfileStatsOut,
    responses={200: {"content": {"application/json": {"example": {"videos": 12, "links": 3}}}}},
)
async def my_stats(
    user=Depends(get_current_user),
    svc: ProfileService = Depends(get_profile_service),
):
    return await svc.stats(user)

@router.put(
    "/{user_id}/roles",
    summary="Set user roles (admin only)",
    description=(
        "Replaces the user's roles with the provided list.\n\n"
        "### Notes\n"
        "- **Admin** permissions required.\n"
        "- Roles not listed will be removed; duplicates are ignored.\n"
    ),
    response_model=UserOut,
    dependencies=[Depends(require_admin)],
    responses={
        403: {"description": "Authenticated but not authorized (admin required)."},
        404: {
            "description": "User not found.",
            "content": {"application/json": {"examples": {"not_found": {"value": {"detail": "user_not_found"}}}}},
        },
    },
)
async def set_user_roles(
    user_id: UUID = Path(..., description="User UUID"),
    payload: list[AssignRoleIn] = Body(default=[], description="List of roles to set (full replacement)"),
    svc: UserService = Depends(get_user_service),
):
    user = await svc.get_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="user_not_found")
    user = await svc.assign_roles(user, [p.role for p in payload])
    return UserOut.from_user(user)
