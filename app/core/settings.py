from functools import lru_cache
from typing import Literal
from urllib.parse import quote

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OMDB_PLACEHOLDER_KEY = "your-omdb-api-key"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Movie Catalog API"
    app_version: str = "1.0.0"
    environment: Literal["development", "test", "production"] = "development"
    log_level: str = "INFO"
    port: int = 5000

    omdb_api_key: str | None = None
    omdb_base_url: str = "http://www.omdbapi.com"
    omdb_timeout_seconds: float = Field(default=10.0, gt=0)
    omdb_concurrency: int = Field(default=8, ge=1)
    omdb_verify_on_startup: bool = False

    # DATABASE_URL wins over the discrete DB_* values when set
    database_url: str | None = None
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "movies"
    db_port: int = 3306
    db_pool_size: int = Field(default=10, ge=1)

    password_hash_rounds: int = Field(default=10, ge=4, le=31)

    allowed_origins: str = "http://localhost:3000,http://localhost:5500,http://127.0.0.1:5500"
    expose_error_details: bool = False

    @property
    def omdb_configured(self) -> bool:
        return bool(self.omdb_api_key) and self.omdb_api_key != OMDB_PLACEHOLDER_KEY

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        user = quote(self.db_user, safe="")
        password = quote(self.db_password, safe="")
        return (
            f"mysql+aiomysql://{user}:{password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
