import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.core.cache import cache
from app.core.config import settings
from app.core.database.db import engine, SessionLocal
from app.core.database.base import Base
from app.core.logging import setup_logging

# Routers
from videos.routers import videos_router, categories_router
from links.routers import links_router
from users.routers import auth_router, users_router, roles_router
from admin.routers import admin_router

from users.repositories.role_repository import RoleRepository
from users.services.role_service import RoleService

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: dev-friendly table creation (use `alembic upgrade head` in prod)
    await cache.init()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with SessionLocal() as session:
        await RoleService(RoleRepository(session)).ensure_defaults()
    logger.info("%s started", settings.app_name)
    yield
    # Shutdown
    await engine.dispose()
    await cache.close()



app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


@app.get("/health", tags=["system"])
async def health():
    return {"status": "ok"}


# Users / Auth
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(roles_router)

# Library
app.include_router(videos_router)
app.include_router(categories_router)
app.include_router(links_router)

# Admin
app.include_router(admin_router)
