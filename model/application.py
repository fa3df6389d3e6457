"""Job application value objects."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from core.exceptions import ValidationError


class PipelineStage(str, Enum):
    """Stages an application moves through."""

    APPLIED = "Applied"
    SCREENING = "Screening"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    WITHDRAWN = "Withdrawn"

    @classmethod
    def lookup(cls, value: str) -> PipelineStage | None:
        """Case-insensitive match on the stage label."""
        folded = value.strip().lower()
        for stage in cls:
            if stage.value.lower() == folded:
                return stage
        return None


@dataclass(frozen=True)
class Job:
    """Job posting id, e.g. SWE123."""

    value: str

    MESSAGE_CONSTRAINTS = (
        "Job ids should only contain alphanumeric characters, hyphens and "
        "underscores, and it should not be blank"
    )
    _PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*\Z")

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError("job", self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return isinstance(value, str) and bool(cls._PATTERN.match(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Stage:
    """Application stage, stored in its canonical capitalisation."""

    value: str

    MESSAGE_CONSTRAINTS = "Stage should be one of: " + ", ".join(
        s.value for s in PipelineStage
    )

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError("stage", self.MESSAGE_CONSTRAINTS)
        # "interview" and "Interview" are the same stage
        object.__setattr__(self, "value", PipelineStage.lookup(self.value).value)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return isinstance(value, str) and PipelineStage.lookup(value) is not None

    @property
    def pipeline_stage(self) -> PipelineStage:
        return PipelineStage(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Application:
    """One applicant's progress on one job."""

    job: Job
    stage: Stage

    def __post_init__(self):
        if not isinstance(self.job, Job):
            raise ValidationError("job", "is required")
        if not isinstance(self.stage, Stage):
            raise ValidationError("stage", "is required")

    def __str__(self) -> str:
        return f"[{self.job}: {self.stage}]"
