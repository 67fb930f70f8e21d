from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_PACKAGE_DIR = Path(__file__).resolve().parent
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Pressroom"
    app_version: str = "0.1.0"
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000

    # Public assets & uploads
    public_dir: str = str(_BACKEND_DIR / "public")
    upload_dir: str = str(_BACKEND_DIR / "public" / "uploads")
    upload_url_prefix: str = "/uploads"
    max_upload_size_mb: int = 5

    # Session cookie carrying flash messages
    session_secret: str = "change-me-in-production"
    session_cookie: str = "pressroom_session"
    session_max_age: int = 60

    # Initial repository contents
    seed_articles: bool = True
    seed_file: str = str(_PACKAGE_DIR / "infrastructure" / "seed" / "seed_articles.yaml")

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_web: str = "INFO"              # page & form handlers
    log_level_storage: str = "INFO"          # uploads, repository, write trace

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
