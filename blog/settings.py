from pathlib import Path

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
    POSTS_DIR: str = "posts"
    LATEST_POSTS_LIMIT: int = 3

    # Logging
    LOG_LEVEL: str = "INFO"

    # Admin key for the reload endpoint
    BLOG_API_KEY: str = ""

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
