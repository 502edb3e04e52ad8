from pathlib import Path
from urllib.parse import quote, urljoin

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
    POSTS_DIR: str = "content/posts"
    POST_EXTENSION: str = ".mdx"

    # 0 keeps the cache per request; a positive value shares it process-wide
    POSTS_CACHE_TTL_SECONDS: float = 0

    # Site
    SITE_NAME: str = "Yuen"
    SITE_DESCRIPTION: str = "记录自己在全栈的学习"
    SITE_AUTHOR: str = "Yuen"
    SITE_URL: str = "http://localhost:3000"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    def absolute_url(self, path: str) -> str:
        # Percent-encode spaces and non-ASCII; existing escapes are kept
        return urljoin(self.SITE_URL, quote(path, safe="/?#&=%:+@"))


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
