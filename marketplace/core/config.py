# marketplace/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    PROJECT_NAME: str = "secondhand-marketplace-api"

    # Database
    DATABASE_URL: str = "sqlite:///./marketplace.db"
    SQL_ECHO: bool = False

    # Session tokens
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    REQUIRE_AUTH: bool = False  # Force a bearer token on user-scoped routes

    # Security rules
    PASSWORD_MIN_LENGTH: int = 8

    # Web
    CORS_ORIGINS: str = "*"
    STATIC_DIR: str = "static"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,  # Allow lowercase env vars
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
