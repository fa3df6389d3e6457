"""Search predicates over applicants."""

from __future__ import annotations

from dataclasses import dataclass

from model.person import Person


@dataclass(frozen=True)
class PersonContainsKeywordsPredicate:
    """Matches a person when any keyword matches via Person.contains."""

    keywords: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "keywords", tuple(self.keywords))

    def __call__(self, person: Person) -> bool:
        return any(person.contains(keyword) for keyword in self.keywords)
