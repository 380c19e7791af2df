"""Configuration settings for flv-reader.

Centralized configuration using Pydantic Settings, grouped into nested
models. Values come from ``FLV_READER_*`` environment variables (nested
fields use ``__``, e.g. ``FLV_READER_DECODER__CHUNK_SIZE``) or a ``.env`` file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from flv_reader.domain.enums import PreviousTagSizeCheck


class AppConfig(BaseModel):
    """Core application configuration."""

    name: str = Field(default="flv-reader", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    environment: Literal["development", "test", "production"] = Field(
        default="development", description="Application environment"
    )


class DecoderConfig(BaseModel):
    """Streaming decoder and driver configuration."""

    chunk_size: int = Field(
        default=64 * 1024,
        gt=0,
        description="Bytes requested from the byte source per read",
    )
    previous_tag_size_check: PreviousTagSizeCheck = Field(
        default=PreviousTagSizeCheck.OFF,
        description="Cross-check PreviousTagSize markers: off, warn or strict",
    )
    skip_to_data_offset: bool = Field(
        default=False,
        description="Discard bytes between the 9-byte header and the header's data offset",
    )


class LoggingConfig(BaseModel):
    """Standard library logging configuration."""

    level: str = Field(default="INFO", description="Application log level")
    format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log record format",
    )


class LogfireConfig(BaseModel):
    """Logfire observability configuration."""

    enabled: bool = Field(default=False, description="Enable Logfire observability")
    service_name: str = Field(default="flv-reader", description="Service name for Logfire")
    service_version: Optional[str] = Field(
        default=None, description="Service version (defaults to app version)"
    )
    environment: Optional[str] = Field(
        default=None, description="Logfire environment (defaults to app environment)"
    )
    api_key: Optional[SecretStr] = Field(
        default=None, description="Logfire API key (optional for local development)"
    )
    console_enabled: bool = Field(default=True, description="Enable Logfire console output")


class Settings(BaseSettings):
    """Application settings with logical grouping."""

    model_config = SettingsConfigDict(
        env_prefix="FLV_READER_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app: AppConfig = Field(default_factory=AppConfig)
    decoder: DecoderConfig = Field(default_factory=DecoderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    logfire: LogfireConfig = Field(default_factory=LogfireConfig)

    @property
    def logfire_env(self) -> str:
        """Get Logfire environment, defaulting to app environment."""
        return self.logfire.environment or self.app.environment

    @property
    def logfire_version(self) -> str:
        """Get Logfire service version, defaulting to app version."""
        return self.logfire.service_version or self.app.version


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings
    """
    return Settings()
