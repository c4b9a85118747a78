"""Typed view of the ``config`` section of config.yaml."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Environment = Literal["development", "production", "test"]


class CORSConfig(BaseModel):
    origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseModel):
    """Loguru sinks: stderr always, a rotating file when ``file`` is set."""

    level: str = "INFO"
    format: Literal["json", "plain"] = "plain"
    file: str | None = Field(default=None, description="Log file path; no file sink when unset")
    max_size_mb: int = Field(default=10, description="Rotate the log file at this size")
    backup_count: int = Field(default=5, description="Rotated files kept")


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///./database.sqlite"
    echo: bool = False
    # Pool settings; ignored for SQLite URLs
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_recycle: int = 1800

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class SideEffectsConfig(BaseModel):
    backend: Literal["logging", "noop"] = Field(
        default="logging",
        description="Implementation used for audit, analytics, mailing and notifications",
    )


class AppConfig(BaseModel):
    name: str = "crm-api"
    environment: Environment = "development"
    host: str = "localhost"
    port: int = 8000
    cors: CORSConfig = Field(default_factory=CORSConfig)


class ConfigData(BaseModel):
    """Root of the application configuration."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    side_effects: SideEffectsConfig = Field(default_factory=SideEffectsConfig)
