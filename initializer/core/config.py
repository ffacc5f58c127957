"""Initializer configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
(prefixed with ``INIT_``) and provides type-safe access to every step.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDERS = [
    ":application_title",
    ":author_name",
]

DEFAULT_EXCLUDED_SUFFIXES = [
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
    ".ico",
    ".woff",
    ".woff2",
    ".eot",
    ".ttf",
    ".otf",
    ".DS_Store",
]


class Settings(BaseSettings):
    """Initializer settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="INIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project tree
    project_root: Path = Field(
        default_factory=Path.cwd,
        description="Root of the project tree to initialize.",
    )
    script_path: Path | None = Field(
        default=None,
        description="Launcher script to exclude and delete. Defaults to the invocation path.",
    )

    # Placeholders
    placeholders: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PLACEHOLDERS),
        description="Placeholder tokens, prompted for in declaration order.",
    )

    # README trimming
    readme_file: str = Field(
        default="README.md",
        description="Documentation file whose template-usage section is removed.",
    )
    readme_separator: str = Field(
        default="---",
        description="Line that ends the template-usage section.",
    )

    # Exclusions
    vcs_dir: str = Field(
        default=".git",
        description="Version-control metadata directory, pruned at any depth.",
    )
    excluded_suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_SUFFIXES),
        description="File name suffixes skipped by content substitution (case-sensitive).",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Optional directory for info.log and error.log.",
    )

    @field_validator("placeholders")
    @classmethod
    def validate_placeholders(cls, v: list[str]) -> list[str]:
        """Reject empty or duplicated placeholder tokens."""
        if any(not token for token in v):
            raise ValueError("placeholders must be non-empty strings")
        duplicates = sorted({token for token in v if v.count(token) > 1})
        if duplicates:
            raise ValueError(f"duplicate placeholders: {', '.join(duplicates)}")
        return v

    @field_validator("project_root")
    @classmethod
    def resolve_project_root(cls, v: Path) -> Path:
        """Resolve the project root to an absolute path."""
        return v.resolve()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
