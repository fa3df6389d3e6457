"""Error hierarchy for the applicant tracker."""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base exception for all tracker errors."""


class ValidationError(TrackerError, ValueError):
    """A field value failed its format rule."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class DuplicateEntryError(TrackerError):
    """Adding an entry would break a uniqueness invariant."""


class DuplicatePersonError(DuplicateEntryError):
    """Raised when an applicant with the same name is already stored."""

    def __init__(self, name: str | None = None):
        self.name = name
        message = "Applicant list contains duplicate applicant(s)"
        super().__init__(f"{message}: {name}" if name else f"{message}.")


class DuplicateInterviewError(DuplicateEntryError):
    """Raised when the same interview is already stored."""

    def __init__(self, interview: str | None = None):
        self.interview = interview
        message = "Interview list contains duplicate interview(s)"
        super().__init__(f"{message}: {interview}" if interview else f"{message}.")


class DuplicateTaskError(DuplicateEntryError):
    """Raised when the same task is already stored."""

    def __init__(self, task: str | None = None):
        self.task = task
        message = "Task list contains duplicate task(s)"
        super().__init__(f"{message}: {task}" if task else f"{message}.")

class PersonNotFoundError(TrackerError):
    """Referenced applicant is not in the address book."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} does not exist in database")


class NotFoundError(TrackerError):
    """Interview or task to remove is not in the address book."""


class MalformedDocumentError(TrackerError):
    """Persisted document is structurally invalid."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class ConfigValidationError(TrackerError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []
