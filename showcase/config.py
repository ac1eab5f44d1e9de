from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from .log_level import LogLevel

class Settings(BaseSettings):
    """Application settings with environment variable support.

    Every field can be overridden with a ``SHOWCASE_``-prefixed environment
    variable or an entry in ``.env``, e.g. ``SHOWCASE_DATABASE_URL``.
    """

    # Database
    database_url: str = Field(
        default="sqlite:///data/showcase.db",
        description="SQLAlchemy URL of the catalogue database"
    )
    echo_sql: bool = Field(default=False, description="Echo emitted SQL to the log")

    # Logging
    log_level: LogLevel = Field(default=LogLevel.CHANGES)
    logs_dir: Optional[Path] = Field(
        default=None,
        description="Directory for the log file, console only when unset"
    )

    # API server
    api_prefix: str = Field(default="/api")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    model_config = SettingsConfigDict(
        env_prefix="SHOWCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def ensure_directories(self) -> None:
        """Create the log directory and the SQLite database directory if needed."""
        if self.logs_dir:
            self.logs_dir.mkdir(parents=True, exist_ok=True)

        prefix = "sqlite:///"
        if self.database_url.startswith(prefix) and self.database_url != prefix + ":memory:":
            db_path = Path(self.database_url[len(prefix):])
            db_path.parent.mkdir(parents=True, exist_ok=True)

# Create global settings instance
settings = Settings()
