# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for CLI and stage defaults. Every field maps to the
upper-cased environment variable of the same name (MANIFEST_PATH, LOG_LEVEL).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


_FORMAT_SUFFIXES: dict[str, tuple[str, ...]] = {
    "json": (".json",),
    "yaml": (".yaml", ".yml"),
}


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Revisioning ===
    hash_length: int = 10

    # === Manifest ===
    manifest_path: Path = Path("rev-manifest.json")
    manifest_merge: bool = False
    manifest_format: Literal["json", "yaml"] = "json"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("hash_length")
    @classmethod
    def validate_hash_length(cls, v: int) -> int:
        if not 4 <= v <= 32:
            raise ValueError("hash_length must be between 4 and 32")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Manifest suffix must agree with the manifest format."""
        suffix = self.manifest_path.suffix.lower()
        known = {s for suffixes in _FORMAT_SUFFIXES.values() for s in suffixes}
        if suffix in known and suffix not in _FORMAT_SUFFIXES[self.manifest_format]:
            raise ConfigurationError(
                f"MANIFEST_PATH {self.manifest_path} does not match "
                f"MANIFEST_FORMAT={self.manifest_format}"
            )
        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
