"""Core infrastructure: config, errors, logging, and preconditions."""

from core.config import Settings, UserPrefs, load_config
from core.exceptions import (
    ConfigValidationError,
    DuplicateEntryError,
    DuplicateInterviewError,
    DuplicatePersonError,
    DuplicateTaskError,
    MalformedDocumentError,
    NotFoundError,
    PersonNotFoundError,
    TrackerError,
    ValidationError,
)
from core.logging import configure_logging
from core.validation import require_all_present

__all__ = [
    "Settings",
    "UserPrefs",
    "load_config",
    "configure_logging",
    "require_all_present",
    "TrackerError",
    "ValidationError",
    "DuplicateEntryError",
    "DuplicatePersonError",
    "DuplicateInterviewError",
    "DuplicateTaskError",
    "PersonNotFoundError",
    "NotFoundError",
    "MalformedDocumentError",
    "ConfigValidationError",
]
