from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Service
    APP_NAME: str = "Creator Agent API"
    APP_VERSION: str = "0.1.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Presentation layer dev server
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Generation settings
    TITLE_MAX_LENGTH: int = 100  # YouTube title field limit
    KEYWORD_LIMIT: int = 15
    CHAPTER_SPACING_SECONDS: int = 45
    DEFAULT_VIDEO_SECONDS: int = 180
    MAX_FIELD_LENGTH: int = 280

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True
    )


# Create global settings instance
settings = Settings()
