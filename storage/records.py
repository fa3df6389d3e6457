"""
JSON record schemas for the persisted address book.

Each record mirrors one entity in raw form. ``from_model`` never fails;
``to_model`` lets the value objects reject malformed fields.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.exceptions import (
    DuplicateInterviewError,
    DuplicatePersonError,
    DuplicateTaskError,
    MalformedDocumentError,
)
from model.address_book import AddressBook
from model.application import Application, Job, Stage
from model.fields import Address, Email, Name, Phone
from model.interview import Interview
from model.person import Person
from model.task import Task


class RecordSchema(BaseModel):
    """Base schema for persisted records."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class ApplicationRecord(RecordSchema):
    """A job application as stored."""

    job: str
    stage: str

    @classmethod
    def from_model(cls, application: Application) -> ApplicationRecord:
        return cls(job=str(application.job), stage=str(application.stage))

    def to_model(self) -> Application:
        return Application(job=Job(self.job), stage=Stage(self.stage))


class PersonRecord(RecordSchema):
    """An applicant as stored."""

    name: str = Field(..., description="Applicant name")
    phone: str
    email: str
    address: str
    applications: list[ApplicationRecord] = Field(default_factory=list)

    @classmethod
    def from_model(cls, person: Person) -> PersonRecord:
        ordered = sorted(
            person.applications, key=lambda a: (a.job.value, a.stage.value)
        )
        return cls(
            name=str(person.name),
            phone=str(person.phone),
            email=str(person.email),
            address=str(person.address),
            applications=[ApplicationRecord.from_model(a) for a in ordered],
        )

    def to_model(self) -> Person:
        return Person(
            name=Name(self.name),
            phone=Phone(self.phone),
            email=Email(self.email),
            address=Address(self.address),
            applications=[a.to_model() for a in self.applications],
        )


class InterviewRecord(RecordSchema):
    """An interview as stored."""

    applicant: str = Field(..., description="Name of the interviewed applicant")
    job: str
    scheduled_at: datetime

    @classmethod
    def from_model(cls, interview: Interview) -> InterviewRecord:
        return cls(
            applicant=str(interview.applicant),
            job=str(interview.job),
            scheduled_at=interview.scheduled_at,
        )

    def to_model(self) -> Interview:
        return Interview(
            applicant=Name(self.applicant),
            job=Job(self.job),
            scheduled_at=self.scheduled_at,
        )


class TaskRecord(RecordSchema):
    """A task as stored."""

    description: str
    deadline: date | None = None

    @classmethod
    def from_model(cls, task: Task) -> TaskRecord:
        return cls(description=task.description, deadline=task.deadline)

    def to_model(self) -> Task:
        return Task(description=self.description, deadline=self.deadline)


class AddressBookDocument(RecordSchema):
    """The whole persisted address book.

    All three sequences are required; a document missing one is malformed
    rather than empty.
    """

    persons: list[PersonRecord]
    interviews: list[InterviewRecord]
    tasks: list[TaskRecord]

    @classmethod
    def parse(cls, data: Any) -> AddressBookDocument:
        """Validate decoded JSON into a document."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedDocumentError(
                f"Malformed address book document ({e.error_count()} errors)",
                errors=e.errors(include_url=False),
            ) from e

    @classmethod
    def from_model(cls, book: AddressBook) -> AddressBookDocument:
        """Snapshot the address book in its current order."""
        return cls(
            persons=[PersonRecord.from_model(p) for p in book.persons],
            interviews=[InterviewRecord.from_model(i) for i in book.interviews],
            tasks=[TaskRecord.from_model(t) for t in book.tasks],
        )

    def to_model(self) -> AddressBook:
        """Build an AddressBook, failing on the first invalid or duplicate entry."""
        book = AddressBook()

        for record in self.persons:
            person = record.to_model()
            if book.has_person(person):
                raise DuplicatePersonError(str(person.name))
            book.add_person(person)

        for record in self.interviews:
            interview = record.to_model()
            if book.has_interview(interview):
                raise DuplicateInterviewError(str(interview))
            book.add_interview(interview)

        for record in self.tasks:
            task = record.to_model()
            if book.has_task(task):
                raise DuplicateTaskError(str(task))
            book.add_task(task)

        return book
