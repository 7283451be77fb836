"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the users service."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASS: str = ""
    DB_NAME: str = "users"
    DB_CHARSET: str = "utf8mb4"
    DATABASE_URL: Optional[str] = None
    DB_CREATE_TABLES: bool = True

    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 3000

    LOG_LEVEL: str = "INFO"

    def sqlalchemy_url(self) -> str:
        """Build a SQLAlchemy URL for MySQL using pymysql driver, unless DATABASE_URL overrides it."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            f"?charset={self.DB_CHARSET}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()
