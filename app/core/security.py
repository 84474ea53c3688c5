# app/core/security.py
"""
Account credentials: password hashes and the bearer tokens issued at login.

Tokens carry the user id, role names and display name so clients can show
who is signed in without a profile round-trip. Authorization still reloads
the user from the database (see ``app.core.auth``).
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import UUID

import jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from app.core.config import settings

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class TokenClaims(BaseModel):
    sub: UUID
    roles: List[str] = []
    name: Optional[str] = None
    exp: datetime


def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)

def create_access_token(user_id: UUID, roles: List[str], display_name: Optional[str] = None) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expires_minutes),
        "sub": str(user_id),
        "roles": roles,
        "name": display_name,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=ALGORITHM)

def decode_token(token: str) -> TokenClaims:
    """Raises ``jwt.PyJWTError`` for bad signatures or expiry, ``ValueError`` for malformed claims."""
    payload = jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[ALGORITHM],
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )
    return TokenClaims.model_validate(payload)
