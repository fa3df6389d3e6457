"""Interview entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.validation import require_all_present
from model.application import Job
from model.fields import Name


@dataclass(frozen=True)
class Interview:
    """A scheduled interview of a stored applicant for a job."""

    applicant: Name
    job: Job
    scheduled_at: datetime

    def __post_init__(self):
        require_all_present(
            applicant=self.applicant,
            job=self.job,
            scheduled_at=self.scheduled_at,
        )

    def is_same_interview(self, other: Interview | None) -> bool:
        """Same applicant booked at the same time."""
        if other is self:
            return True
        return (
            other is not None
            and other.applicant == self.applicant
            and other.scheduled_at == self.scheduled_at
        )

    def is_for(self, name: Name) -> bool:
        return self.applicant == name

    def __str__(self) -> str:
        return f"{self.applicant} ({self.job}) at {self.scheduled_at:%Y-%m-%d %H:%M}"
