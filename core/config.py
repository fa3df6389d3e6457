"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigValidationError


class UserPrefs(BaseModel):
    """User preferences stored in preferences.yaml."""

    address_book_file: str | None = Field(
        None, description="Overrides Settings.data_file when set"
    )
    default_search_limit: int = Field(default=50, ge=1)


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    data_file: str = "./data/addressbook.json"
    preferences_file: str = "./config/preferences.yaml"

    # Runtime
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> str:
        return str(v).strip().upper() or "INFO"

    def resolve_data_file(self, prefs: UserPrefs | None = None) -> Path:
        """Effective address book path, preferring the YAML override."""
        if prefs is not None and prefs.address_book_file:
            return Path(prefs.address_book_file)
        return Path(self.data_file)


def load_user_prefs(path: Path) -> UserPrefs:
    """Load user preferences from a YAML file."""
    if not path.exists():
        return UserPrefs()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Unreadable {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigValidationError(f"Invalid {path.name}: expected a mapping")

    try:
        return UserPrefs(**data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid {path.name}",
            errors=e.errors(),
        ) from e


def save_user_prefs(prefs: UserPrefs, path: Path) -> None:
    """Write user preferences back to YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(prefs.model_dump(mode="json"), f, sort_keys=False)


def load_config(
    preferences_path: Path | None = None,
    settings: Settings | None = None,
) -> tuple[Settings, UserPrefs]:
    """Load all configuration.

    Returns:
        Tuple of (Settings, UserPrefs)
    """
    settings = settings or Settings()
    preferences_path = preferences_path or Path(settings.preferences_file)
    prefs = load_user_prefs(preferences_path)

    return settings, prefs
