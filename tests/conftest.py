"""
Pytest configuration and shared fixtures
"""
from datetime import date, datetime

import pytest

from model import (
    Address,
    AddressBook,
    Application,
    Email,
    Interview,
    Job,
    Name,
    Person,
    Phone,
    Stage,
    Task,
)


def make_person(
    name="Alex Yeoh",
    phone="87438807",
    email="alexyeoh@example.com",
    address="Blk 30",
    applications=(("SWE123", "Interview"),),
):
    """Build a Person from raw strings"""
    return Person(
        Name(name),
        Phone(phone),
        Email(email),
        Address(address),
        [Application(Job(job), Stage(stage)) for job, stage in applications],
    )


@pytest.fixture(name="make_person")
def make_person_fixture():
    """Factory for persons built from raw strings"""
    return make_person


@pytest.fixture
def alex():
    """Applicant with one application at the interview stage"""
    return make_person()


@pytest.fixture
def bernice():
    """Applicant with two applications"""
    return make_person(
        name="Bernice Yu",
        phone="99272758",
        email="berniceyu@example.com",
        address="Blk 30 Lorong 3 Serangoon Gardens",
        applications=(("SWE123", "Applied"), ("DS456", "Offer")),
    )


@pytest.fixture
def interview():
    return Interview(Name("Alex Yeoh"), Job("SWE123"), datetime(2024, 3, 4, 14, 0))


@pytest.fixture
def task():
    return Task("Send offer letter", date(2024, 3, 8))


@pytest.fixture
def address_book(alex, bernice, interview, task):
    """Address book with two applicants, one interview and one task"""
    book = AddressBook()
    book.add_person(alex)
    book.add_person(bernice)
    book.add_interview(interview)
    book.add_task(task)
    return book
