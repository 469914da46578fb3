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
    ASSETS_DIR: str = "assets"
    FAVICON_PATH: str = "favicon.ico"

    # Viewer timezone signals
    TIMEZONE_HEADER: str = "X-Timezone"
    TIMEZONE_COOKIE: str = "timezone"

    # Static assets are immutable for the process lifetime
    ASSET_MAX_AGE: int = 31536000

    # Page chrome
    BLOG_TITLE: str = "My Fancy Blog"
    BLOG_TAGLINE: str = "Your daily dose of awesome reads!"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def assets_path(self) -> Path:
        return Path(self.ASSETS_DIR)

    @property
    def favicon_file(self) -> Path:
        return Path(self.FAVICON_PATH)

    @property
    def asset_cache_control(self) -> str:
        return f"public, max-age={self.ASSET_MAX_AGE}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings
