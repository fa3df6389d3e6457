"""In-memory applicant store."""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Iterable

import structlog

from core.exceptions import (
    DuplicateInterviewError,
    DuplicatePersonError,
    DuplicateTaskError,
    NotFoundError,
    PersonNotFoundError,
)
from model.fields import Name
from model.interview import Interview
from model.person import Person
from model.predicates import PersonContainsKeywordsPredicate
from model.task import Task

logger = structlog.get_logger()


class AddressBook:
    """Holds applicants, interviews and tasks.

    Guarantees:
        - no two stored persons satisfy ``is_same_person``
        - no two stored interviews satisfy ``is_same_interview``
        - no two stored tasks satisfy ``is_same_task``
        - every interview refers to a stored applicant

    Each check-then-write runs under one lock.
    """

    def __init__(self) -> None:
        self._persons: list[Person] = []
        self._interviews: list[Interview] = []
        self._tasks: list[Task] = []
        self._lock = threading.RLock()

    @classmethod
    def copy_of(cls, other: AddressBook) -> AddressBook:
        """New address book holding the same entries as ``other``."""
        book = cls()
        book.reset_data(other)
        return book

    def reset_data(self, other: AddressBook) -> None:
        """Replace every entry with those of ``other``."""
        with self._lock:
            self._persons = list(other.persons)
            self._interviews = list(other.interviews)
            self._tasks = list(other.tasks)

    # --- Read-only views ---

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    @property
    def interviews(self) -> tuple[Interview, ...]:
        return tuple(self._interviews)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    # --- Persons ---

    def has_person(self, person: Person) -> bool:
        with self._lock:
            return any(p.is_same_person(person) for p in self._persons)

    def _has_applicant(self, name: Name) -> bool:
        return any(p.name == name for p in self._persons)

    def get_person(self, name: Name) -> Person:
        with self._lock:
            for p in self._persons:
                if p.name == name:
                    return p
        raise PersonNotFoundError(str(name))

    def add_person(self, person: Person) -> None:
        with self._lock:
            if self.has_person(person):
                raise DuplicatePersonError(str(person.name))
            self._persons.append(person)
        logger.debug("Added applicant", name=str(person.name))

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``.

        Interviews booked under the old name follow a rename.
        """
        with self._lock:
            index = self._index_of(target)
            if not target.is_same_person(edited) and self.has_person(edited):
                raise DuplicatePersonError(str(edited.name))
            self._persons[index] = edited
            if target.name != edited.name:
                self._interviews = [
                    replace(i, applicant=edited.name) if i.is_for(target.name) else i
                    for i in self._interviews
                ]
        logger.debug("Updated applicant", name=str(edited.name))

    def remove_person(self, person: Person) -> None:
        """Remove ``person`` together with their interviews."""
        with self._lock:
            index = self._index_of(person)
            del self._persons[index]
            self._interviews = [i for i in self._interviews if not i.is_for(person.name)]
        logger.debug("Removed applicant", name=str(person.name))

    def _index_of(self, person: Person) -> int:
        for index, p in enumerate(self._persons):
            if p == person:
                return index
        raise PersonNotFoundError(str(person.name))

    def find_persons(self, keywords: Iterable[str]) -> list[Person]:
        """Persons matching any keyword, in insertion order."""
        predicate = PersonContainsKeywordsPredicate(tuple(keywords))
        with self._lock:
            return [p for p in self._persons if predicate(p)]

    # --- Interviews ---

    def has_interview(self, interview: Interview) -> bool:
        with self._lock:
            return any(i.is_same_interview(interview) for i in self._interviews)

    def add_interview(self, interview: Interview) -> None:
        with self._lock:
            if self.has_interview(interview):
                raise DuplicateInterviewError(str(interview))
            if not self._has_applicant(interview.applicant):
                raise PersonNotFoundError(str(interview.applicant))
            self._interviews.append(interview)
        logger.debug("Added interview", applicant=str(interview.applicant))

    def remove_interview(self, interview: Interview) -> None:
        with self._lock:
            if interview not in self._interviews:
                raise NotFoundError(f"Interview not found: {interview}")
            self._interviews.remove(interview)

    def interviews_for(self, person: Person) -> list[Interview]:
        with self._lock:
            return [i for i in self._interviews if i.is_for(person.name)]

    # --- Tasks ---

    def has_task(self, task: Task) -> bool:
        with self._lock:
            return any(t.is_same_task(task) for t in self._tasks)

    def add_task(self, task: Task) -> None:
        with self._lock:
            if self.has_task(task):
                raise DuplicateTaskError(str(task))
            self._tasks.append(task)
        logger.debug("Added task", description=task.description)

    def remove_task(self, task: Task) -> None:
        with self._lock:
            if task not in self._tasks:
                raise NotFoundError(f"Task not found: {task}")
            self._tasks.remove(task)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return (
            self.persons == other.persons
            and self.interviews == other.interviews
            and self.tasks == other.tasks
        )

    def __repr__(self) -> str:
        return (
            f"AddressBook({len(self._persons)} persons, "
            f"{len(self._interviews)} interviews, {len(self._tasks)} tasks)"
        )
