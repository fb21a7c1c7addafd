# ubergallery/config.py
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    CACHE_DIRECTORY_NAME,
    CONFIG_FILENAME,
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_PUBLIC_DIRECTORY,
    DEFAULT_VIEW_DIRECTORY,
    GALLERY_DIRECTORY_NAME,
)
from .enums import LogLevel


class Settings(BaseSettings):
    """
    Process-level settings for the gallery server.

    Values come from ``UBERGALLERY_*`` environment variables or a ``.env``
    file. Gallery presentation and thumbnail parameters live in the INI file
    loaded by ``ubergallery.gallery_config`` instead.
    """

    environment: str = "development"

    # API
    api_host: str = Field(default=DEFAULT_API_HOST, description="API host to bind to")
    api_port: int = Field(
        default=DEFAULT_API_PORT, ge=1, le=65535, description="API port to bind to"
    )
    api_reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    # ============= PATH CONFIGURATION =============

    public_directory: str = Field(
        default=DEFAULT_PUBLIC_DIRECTORY,
        description="Root directory served under /public",
    )
    gallery_directory_name: str = Field(
        default=GALLERY_DIRECTORY_NAME,
        description="Subdirectory of the public root holding source images",
    )
    cache_directory_name: str = Field(
        default=CACHE_DIRECTORY_NAME,
        description="Subdirectory of the public root holding thumbnails",
    )
    view_directory: str = Field(
        default=DEFAULT_VIEW_DIRECTORY, description="Directory of HTML themes"
    )
    config_file: str = Field(
        default=CONFIG_FILENAME, description="Gallery INI configuration file"
    )

    @property
    def public_path(self) -> Path:
        """Get public root directory as Path object"""
        return Path(self.public_directory)

    @property
    def gallery_path(self) -> Path:
        """Source images directory"""
        return self.public_path / self.gallery_directory_name

    @property
    def cache_path(self) -> Path:
        """Thumbnail artifacts directory"""
        return self.public_path / self.cache_directory_name

    @property
    def view_path(self) -> Path:
        return Path(self.view_directory)

    @property
    def config_path(self) -> Path:
        return Path(self.config_file)

    def ensure_directories(self):
        """Create all required directories if they don't exist"""
        for directory in (self.public_path, self.gallery_path, self.cache_path):
            directory.mkdir(parents=True, exist_ok=True)

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    enable_file_logging: bool = Field(
        default=False, description="Also write logs to a rotating file"
    )
    log_directory: Optional[str] = Field(
        default="./logs", description="Directory for the log file"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v) -> LogLevel:
        """Validate log level is one of the allowed values"""
        allowed_levels = LogLevel.__members__.keys()
        v_upper = str(getattr(v, "value", v)).upper()
        if v_upper not in allowed_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(allowed_levels)}"
            )
        return LogLevel[v_upper]

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is one of the allowed values"""
        allowed_envs = ["development", "staging", "production"]
        v_lower = v.lower()
        if v_lower not in allowed_envs:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {', '.join(allowed_envs)}"
            )
        return v_lower

    model_config = SettingsConfigDict(
        env_prefix="UBERGALLERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance, consumed only by the application wiring in main.py
settings = Settings()
