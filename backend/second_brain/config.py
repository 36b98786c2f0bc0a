"""Application configuration"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path

# Local development reads the .env at the project root, deployments use the
# process environment directly.
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent
_project_root = _backend_dir.parent
_env_file = _project_root / ".env" if (_project_root / ".env").exists() else None


class Settings(BaseSettings):
    """Application settings"""
    # Application
    APP_NAME: str = "Second Brain"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Store connection string, required
    DATABASE_URL: str

    # JWT, the secret is required
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24 hours

    # Password hashing cost
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)

    # Share links
    SHARE_HASH_LENGTH: int = Field(default=16, ge=10, le=64)
    SHARE_HASH_MAX_ATTEMPTS: int = Field(default=3, ge=1)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS
    CORS_ORIGINS: list[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    @field_validator("DATABASE_URL", "JWT_SECRET_KEY")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    class Config:
        env_file = str(_env_file) if _env_file else ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Return the settings singleton"""
    return Settings()


settings = get_settings()
