# conftest.py
import os

# Settings are read at import time; point them at throwaway values first.
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("DB_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Any, AsyncGenerator, Dict, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.main import app
from app.core.auth import get_current_user
from app.core.database.base import Base
from app.core.database.db import get_session
from app.core.security import hash_password
from shared.wiring import get_cache, get_metadata_resolver
from users.models.role import RoleName
from users.repositories.role_repository import RoleRepository
from users.repositories.user_repository import UserRepository
from videos.domain import platforms
from videos.domain.entities.metadata import MetadataResolution, VideoMetadata
from videos.domain.platforms import Platform
from videos.ports.outbound.cache_port import CachePort
from videos.ports.outbound.metadata_port import MetadataResolverPort


# ---- Fakes ------------------------------------------------------------------

class _FakeCache(CachePort):
    def __init__(self) -> None:
        self.store: Dict[str, Any] = {}

    async def get(self, key: str) -> Optional[Any]:
        return self.store.get(key)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        # store the dict directly, the real adapter hands back decoded JSON too
        self.store[key] = value
        return True

    async def delete_keys(self, *keys: str) -> int:
        return sum(1 for k in keys if self.store.pop(k, None) is not None)

    def keys(self):
        return list(self.store.keys())


FAKE_TITLE = "Never Gonna Give You Up"
FAKE_CHANNEL = "Rick Astley"
FAKE_CHANNEL_URL = "https://www.youtube.com/@RickAstleyYT"


class FakeResolver(MetadataResolverPort):
    """
    Offline resolver. YouTube URLs resolve to fixed metadata unless a test
    sets ``next_result``; Facebook is always ``unavailable``.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.next_result: Optional[MetadataResolution] = None

    async def resolve(self, url: str) -> Optional[MetadataResolution]:
        self.calls.append(url)
        platform, video_id = platforms.match(url)
        if platform is Platform.unknown:
            return None
        if self.next_result is not None:
            return self.next_result
        if platform is Platform.facebook:
            return MetadataResolution.unavailable(platform, video_id, platforms.PLACEHOLDER_THUMBNAIL)
        return MetadataResolution.resolved(
            platform,
            video_id,
            VideoMetadata(
                title=FAKE_TITLE,
                channel_name=FAKE_CHANNEL,
                channel_url=FAKE_CHANNEL_URL,
                thumbnail_url=platforms.derive_thumbnail(url, platform, video_id),
            ),
        )


# ---- Async engine + session --------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def async_engine():
    # StaticPool keeps a single connection so every session sees the same in-memory DB
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    SessionMaker = async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)
    async with SessionMaker() as s:
        yield s


@pytest_asyncio.fixture(autouse=True, scope="function")
async def override_get_session(db_session: AsyncSession):
    """Requests and assertions share one session, so objects seeded here are the ones handlers see."""
    async def _dep():
        yield db_session
    app.dependency_overrides[get_session] = _dep
    yield
    app.dependency_overrides.pop(get_session, None)


@pytest.fixture
def fake_cache() -> _FakeCache:
    fc = _FakeCache()
    app.dependency_overrides[get_cache] = lambda: fc
    yield fc
    app.dependency_overrides.pop(get_cache, None)


@pytest.fixture
def fake_resolver() -> FakeResolver:
    fr = FakeResolver()
    app.dependency_overrides[get_metadata_resolver] = lambda: fr
    yield fr
    app.dependency_overrides.pop(get_metadata_resolver, None)


# ---- Users -------------------------------------------------------------------

@pytest.fixture
def make_user(db_session: AsyncSession):
    async def _make(email: str, password: str = "s3cret-pass", roles=("user",), display_name=None):
        role_objs = await RoleRepository(db_session).ensure([RoleName(r) for r in roles])
        return await UserRepository(db_session).create(
            email, hash_password(password), role_objs, display_name=display_name
        )
    return _make


@pytest_asyncio.fixture
async def user(make_user):
    return await make_user("sam@example.com", display_name="Sam")


@pytest_asyncio.fixture
async def admin(make_user):
    return await make_user("admin@example.com", roles=("admin", "user"), display_name="Admin")


@pytest.fixture
def login_as():
    """Bypass token decoding and act as the given user."""
    def _login(u):
        app.dependency_overrides[get_current_user] = lambda: u
        return u
    yield _login
    app.dependency_overrides.pop(get_current_user, None)


# ---- HTTP client -------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def client(fake_cache, fake_resolver) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c
