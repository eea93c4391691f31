# expense_backend/config.py
# Environment-backed settings for the expense backend

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Settings read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Database: DATABASE_URL wins, then the DB_* parts (MySQL), then SQLite
    database_url: Optional[str] = Field(default=None)
    db_host: Optional[str] = Field(default=None)
    db_user: Optional[str] = Field(default=None)
    db_password: Optional[str] = Field(default=None)
    db_name: Optional[str] = Field(default=None)
    sqlite_path: str = Field(default="./database.db")

    # Tokens and password hashing
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")
    token_expire_seconds: int = Field(default=86400)
    bcrypt_rounds: int = Field(default=8, ge=4, le=31)

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    log_level: str = Field(default="INFO")

    def sqlalchemy_url(self):
        """Resolve the SQLAlchemy URL for the configured database."""
        if self.database_url:
            return self.database_url
        if self.db_host and self.db_name:
            return URL.create(
                "mysql+pymysql",
                username=self.db_user,
                password=self.db_password,
                host=self.db_host,
                database=self.db_name,
            )
        return f"sqlite:///{self.sqlite_path}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
