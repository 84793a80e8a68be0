from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "src/posts"
    CONTENT_EXTENSIONS: List[str] = [".mdx", ".md"]

    # Site
    ENVIRONMENT: str = "production"
    SITE_URL: str = "https://nobuti.com"
    LATEST_ARTICLES_LIMIT: int = 5

    # Logging
    LOG_LEVEL: str = "INFO"

    # Optional key for the article routes, empty means open
    CONTENT_API_KEY: str = ""

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
