"""Configuration settings for the suggestion engine using Pydantic Settings.

This module provides type-safe configuration management with automatic validation
and environment variable loading. Every value has a default, so the engine
runs without any environment configured.
"""

import logging
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from suggest_members.core.constants import (
    MANIFEST_FILE_NAME,
    MAX_SUGGESTIONS,
    MIN_SIMILARITY_SCORE,
    VENDOR_DIRECTORY,
)
from suggest_members.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Central configuration management with Pydantic validation.

    All settings are loaded from ``SUGGEST_*`` environment variables with
    automatic type conversion and validation.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUGGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # ========================================
    # Debug Settings
    # ========================================
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    # ========================================
    # Ranking Settings
    # ========================================
    max_suggestions: int = Field(
        default=MAX_SUGGESTIONS,
        ge=1,
        le=20,
        description="Maximum number of suggestions per diagnostic",
    )

    min_similarity_score: float = Field(
        default=MIN_SIMILARITY_SCORE,
        ge=0.0,
        lt=1.0,
        description="Candidates must score strictly above this (0.0-1.0)",
    )

    # ========================================
    # Workspace Settings
    # ========================================
    manifest_file_name: str = Field(
        default=MANIFEST_FILE_NAME,
        description="File name of the package manifest",
    )

    vendor_directory: str = Field(
        default=VENDOR_DIRECTORY,
        description="Directory name holding vendored dependencies",
    )

    # ========================================
    # Validators
    # ========================================
    @field_validator("manifest_file_name", "vendor_directory")
    @classmethod
    def validate_plain_name(cls, v: str) -> str:
        """Reject empty names and names containing path separators."""
        v = v.strip()
        if not v or "/" in v or "\\" in v:
            msg = f"Expected a bare file or directory name, got {v!r}"
            raise ValueError(msg)
        return v

    # ========================================
    # Helper Methods
    # ========================================
    def to_dict(self) -> dict[str, Any]:
        """Export settings as a dictionary."""
        return {
            "debug": self.debug,
            "max_suggestions": self.max_suggestions,
            "min_similarity_score": self.min_similarity_score,
            "manifest_file_name": self.manifest_file_name,
            "vendor_directory": self.vendor_directory,
        }


# Singleton pattern with proper typing
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern).

    Raises:
        ConfigurationError: If the environment holds invalid SUGGEST_* values
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            _settings_instance = Settings()
        except ValidationError as e:
            msg = f"Invalid suggestion engine configuration: {e}"
            raise ConfigurationError(msg) from e
        logger.debug("Settings initialized from environment")
        logger.debug(
            "Ranking: max_suggestions=%d min_similarity_score=%.2f",
            _settings_instance.max_suggestions,
            _settings_instance.min_similarity_score,
        )
    return _settings_instance


def reset_settings() -> None:
    """Reset settings instance (useful for testing)."""
    global _settings_instance
    _settings_instance = None
