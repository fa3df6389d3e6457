"""Recruiter task entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.exceptions import ValidationError


@dataclass(frozen=True)
class Task:
    """A to-do item with an optional deadline."""

    description: str
    deadline: date | None = None

    MESSAGE_CONSTRAINTS = "Task descriptions should not be blank"

    def __post_init__(self):
        if not isinstance(self.description, str) or not self.description.strip():
            raise ValidationError("description", self.MESSAGE_CONSTRAINTS)

    def is_same_task(self, other: Task | None) -> bool:
        """Same description, ignoring case, due on the same day."""
        if other is self:
            return True
        return (
            other is not None
            and other.description.strip().lower() == self.description.strip().lower()
            and other.deadline == self.deadline
        )

    def __str__(self) -> str:
        if self.deadline is None:
            return self.description
        return f"{self.description} (by {self.deadline.isoformat()})"
