from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    app_name: str = "Video Shelf"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # DB settings
    db_user: str = "videoshelf"
    db_pass: str = "videoshelf"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "videoshelf"
    # full URL wins over the parts above (tests use sqlite+aiosqlite)
    db_url: str | None = None

    # Auth
    jwt_secret: str
    jwt_issuer: str = "videoshelf"
    jwt_audience: str = "videoshelf-clients"
    jwt_expires_minutes: int = 60

    # Redis (item cache)
    redis_url: str = "redis://localhost:6379/0"
    cache_ttl_seconds: int = 120

    # Video platforms
    oembed_endpoint: str = "https://www.youtube.com/oembed"
    oembed_timeout_seconds: float = 10.0
    thumbnail_placeholder: str = "/placeholder.svg"

    @computed_field
    @property
    def database_url(self) -> str:
        if self.db_url:
            return self.db_url
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_pass}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

settings = Settings()
