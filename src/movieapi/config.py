"""Runtime configuration.

All settings come from environment variables so the same build runs
against a local SQLite file in development and a server database elsewhere.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATABASE_URL = "sqlite:///data/movies.db"
DEFAULT_UPLOAD_DIR = Path("uploads")
DEFAULT_STATIC_PATH = "/StaticFiles"


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings.

    Attributes:
        database_url: SQLAlchemy connection string.
        upload_dir: Directory posters are written to and served from.
        static_path: URL path the upload directory is mounted at.
        cors_origins: Allowed CORS origins ("*" allows any).
        log_level: Root logging level name.
    """

    database_url: str = DEFAULT_DATABASE_URL
    upload_dir: Path = DEFAULT_UPLOAD_DIR
    static_path: str = DEFAULT_STATIC_PATH
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.upload_dir = Path(self.upload_dir)
        # Mount paths must start with "/" and carry no trailing slash
        self.static_path = "/" + self.static_path.strip("/")

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from MOVIEAPI_* environment variables."""
        return cls(
            database_url=os.environ.get("MOVIEAPI_DATABASE_URL", DEFAULT_DATABASE_URL),
            upload_dir=Path(os.environ.get("MOVIEAPI_UPLOAD_DIR", str(DEFAULT_UPLOAD_DIR))),
            static_path=os.environ.get("MOVIEAPI_STATIC_PATH", DEFAULT_STATIC_PATH),
            cors_origins=_split_origins(os.environ.get("MOVIEAPI_CORS_ORIGINS", "*")),
            log_level=os.environ.get("MOVIEAPI_LOG_LEVEL", "INFO").upper(),
        )
