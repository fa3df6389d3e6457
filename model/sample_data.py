"""Sample address book used to seed a fresh data file."""

from __future__ import annotations

from datetime import date, datetime

from model.address_book import AddressBook
from model.application import Application, Job, Stage
from model.fields import Address, Email, Name, Phone
from model.interview import Interview
from model.person import Person
from model.task import Task


def _applications(*pairs: tuple[str, str]) -> list[Application]:
    return [Application(job=Job(job), stage=Stage(stage)) for job, stage in pairs]


def sample_persons() -> list[Person]:
    return [
        Person(
            Name("Alex Yeoh"),
            Phone("87438807"),
            Email("alexyeoh@example.com"),
            Address("Blk 30 Geylang Street 29, #06-40"),
            _applications(("SWE123", "Interview")),
        ),
        Person(
            Name("Bernice Yu"),
            Phone("99272758"),
            Email("berniceyu@example.com"),
            Address("Blk 30 Lorong 3 Serangoon Gardens, #07-18"),
            _applications(("SWE123", "Applied"), ("DS456", "Offer")),
        ),
        Person(
            Name("Charlotte Oliveiro"),
            Phone("93210283"),
            Email("charlotte@example.com"),
            Address("Blk 11 Ang Mo Kio Street 74, #11-04"),
            _applications(("PM789", "Screening")),
        ),
        Person(
            Name("David Li"),
            Phone("91031282"),
            Email("lidavid@example.com"),
            Address("Blk 436 Serangoon Gardens Street 26, #16-43"),
            [],
        ),
    ]


def sample_address_book() -> AddressBook:
    book = AddressBook()
    for person in sample_persons():
        book.add_person(person)
    book.add_interview(
        Interview(Name("Alex Yeoh"), Job("SWE123"), datetime(2024, 3, 4, 14, 0))
    )
    book.add_task(Task("Send offer letter to Bernice Yu", date(2024, 3, 8)))
    book.add_task(Task("Review portfolio submissions"))
    return book
