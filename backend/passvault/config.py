"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "password_manager"
    mongo_server_selection_timeout_ms: int = 5000

    # JWT Configuration
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60

    # Password hashing work factor
    bcrypt_rounds: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    # Bearer tokens need no cookies; never combine True with a wildcard origin
    cors_allow_credentials: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
