"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the FastAPI backend."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    PROJECT_NAME: str = "User Management API"
    API_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: Optional[str] = None
    USERS_DB_HOST: str = "localhost"
    USERS_DB_PORT: int = 3306
    USERS_DB_NAME: str = "usersdb"
    USERS_DB_USER: str = "root"
    USERS_DB_PASSWORD: str = ""
    USERS_DB_CHARSET: str = "utf8mb4"

    CORS_ALLOWED_ORIGINS: str = (
        "http://localhost:3000,http://localhost:5173,http://localhost:8501,http://frontend"
    )

    def sqlalchemy_url(self) -> str:
        """Return DATABASE_URL, or build a MySQL URL for the pymysql driver."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.USERS_DB_USER}:{self.USERS_DB_PASSWORD}"
            f"@{self.USERS_DB_HOST}:{self.USERS_DB_PORT}/{self.USERS_DB_NAME}"
            f"?charset={self.USERS_DB_CHARSET}"
        )

    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()


settings = get_settings()
