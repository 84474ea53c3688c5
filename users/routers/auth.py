from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.auth import get_current_user
from app.core.database.db import get_session
from activity.services.activity_service import ActivityService
from shared.wiring import get_activity_service
from users.entities.auth import LoginIn, TokenOut
from users.repositories.user_repository import UserRepository
from users.services.auth_service import AuthService

router = APIRouter(
    prefix="/v1/auth",
    tags=["auth"],
)

def get_auth_service(
    db: AsyncSession = Depends(get_session),
    activity: ActivityService = Depends(get_activity_service),
) -> AuthService:
    return AuthService(UserRepository(db), activity)

@router.post(
    "/token",
    summary="Issue JWT access token",
    description=(
        "Authenticates a user with email and password and returns a short‑lived JWT access token.\n\n"
        "### Notes\n"
        "- Use this token in the `Authorization: Bearer <token>` header for protected endpoints.\n"
        "- The token reflects the user's roles at issuance time.\n"
        "- A successful login is written to the activity log.\n"
        "- If credentials are invalid or the account is inactive, the server returns **401 Unauthorized**.\n"
    ),
    response_model=TokenOut,
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Authentication succeeded; JWT returned.",
            "content": {
                "application/json": {
                    "examples": {
                        "success": {
                            "summary": "Successful login",
                            "value": {"access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...", "token_type": "bearer"},
                        }
                    }
                }
            },
        },
        401: {
            "description": "Invalid email or password, or user is inactive.",
            "content": {
                "application/json": {
                    "examples": {
                        "invalid_credentials": {
                            "summary": "Bad email/password",
                            "value": {"detail": "invalid_credentials"},
                        },
                    }
                }
            },
        },
    },
)
async def issue_token(
    payload: LoginIn,
    svc: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email & password and receive a JWT.

    **Errors**
    - `401 invalid_credentials` – Email/password mismatch or inactive user
    - `422` – Validation error (malformed email, missing fields, etc.)
    """
    try:
        token = await svc.login(payload.email, payload.password)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid_credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenOut(access_token=token)

@router.post(
    "/logout",
    summary="Log out",
    description="Tokens are stateless; the client drops its token. The logout is recorded in the activity log.",
    responses={200: {"content": {"application/json": {"example": {"ok": True}}}}},
)
async def logout(
    user=Depends(get_current_user),
    svc: AuthService = Depends(get_auth_service),
):
    await svc.logout(user)
    return {"ok": True}
