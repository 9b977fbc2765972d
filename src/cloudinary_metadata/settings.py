"""Configuration management using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloudinary_metadata.utils.errors import ConfigurationError


class MetadataSettings(BaseSettings):
    """Metadata params settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CLOUDINARY_METADATA_",
        extra="ignore",
    )

    # Validation behaviour
    cascade_and_rules: bool = Field(
        default=False,
        description="Also check every nested rule when checking an 'and' rule",
    )

    # Diagnostics
    log_params: bool = Field(
        default=False,
        description="Log the serialized params dictionary at DEBUG level",
    )


@lru_cache(maxsize=1)
def get_settings() -> MetadataSettings:
    """Return the process-wide settings, loading them on first use."""
    try:
        return MetadataSettings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid metadata settings: {e.error_count()} error(s)",
            "Check the CLOUDINARY_METADATA_* environment variables",
        ) from e


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
