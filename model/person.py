"""Applicant entity."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from core.exceptions import ValidationError
from core.validation import require_all_present
from model.application import Application
from model.fields import Address, Email, Name, Phone

JOB_ID_PREFIX = "jobid:"
PROGRESS_PREFIX = "progress:"


def _after_first_colon(term: str) -> str:
    return term.split(":", 1)[1] if ":" in term else ""


@dataclass(frozen=True, eq=False, init=False)
class Person:
    """An applicant in the address book.

    Every field is required and validated. Instances are immutable; an
    edit builds a new Person and replaces the old one in the store.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    applications: frozenset[Application]

    def __init__(
        self,
        name: Name,
        phone: Phone,
        email: Email,
        address: Address,
        applications: Iterable[Application],
    ):
        require_all_present(
            name=name,
            phone=phone,
            email=email,
            address=address,
            applications=applications,
        )
        for field, value, kind in (
            ("name", name, Name),
            ("phone", phone, Phone),
            ("email", email, Email),
            ("address", address, Address),
        ):
            if not isinstance(value, kind):
                raise ValidationError(field, f"must be a {kind.__name__}")
        # a bare string would otherwise become a set of characters
        if isinstance(applications, (str, bytes)):
            raise ValidationError("applications", "must be a collection of Application")
        applications = frozenset(applications)
        if not all(isinstance(a, Application) for a in applications):
            raise ValidationError("applications", "must be a collection of Application")

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "phone", phone)
        object.__setattr__(self, "email", email)
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "applications", applications)

    def _fields(self) -> tuple:
        return (self.name, self.phone, self.email, self.address, self.applications)

    def is_same_person(self, other: Person | None) -> bool:
        """Weak identity: both persons have the same name."""
        if other is self:
            return True
        return other is not None and other.name == self.name

    def __eq__(self, other: object) -> bool:
        """Strong identity: every field, including applications, is equal."""
        if other is self:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return other._fields() == self._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def with_applications(self, applications: Iterable[Application]) -> Person:
        """Copy of this person with a different application set."""
        return replace(self, applications=applications)

    def contains(self, term: str) -> bool:
        """Check whether this person matches a search term.

        ``jobid:<id>`` matches an application whose job id equals ``<id>``
        exactly. ``progress:<stage>`` matches an application stage,
        ignoring case. Anything after the first colon is taken as the
        value. Every term is also tried as a case-insensitive substring of
        name, phone, email and address.
        """
        this_name = str(self.name).lower()
        assert this_name, "Did not capture name"
        this_phone = str(self.phone).lower()
        assert this_phone, "Did not capture phone"
        this_email = str(self.email).lower()
        assert this_email, "Did not capture email"
        this_address = str(self.address).lower()
        assert this_address, "Did not capture address"

        lowered = term.lower()

        if JOB_ID_PREFIX in lowered:
            job_id = _after_first_colon(term)
            if any(str(app.job) == job_id for app in self.applications):
                return True

        if PROGRESS_PREFIX in lowered:
            stage = _after_first_colon(lowered)
            if any(str(app.stage).lower() == stage for app in self.applications):
                return True

        return any(
            lowered in field
            for field in (this_name, this_phone, this_email, this_address)
        )

    def __str__(self) -> str:
        text = (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}"
        )
        if self.applications:
            ordered = sorted(self.applications, key=lambda a: (a.job.value, a.stage.value))
            text += "; Applications: " + "".join(str(a) for a in ordered)
        return text
