"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Query

from core.config import Settings, UserPrefs, load_config
from core.exceptions import TrackerError
from model.address_book import AddressBook
from storage.store import JsonAddressBookStorage
from storage.records import InterviewRecord, PersonRecord, TaskRecord

app = FastAPI(
    title="Applicant Tracker API",
    description="Read-only API over the applicant address book",
    version="0.1.0",
)


def get_config() -> tuple[Settings, UserPrefs]:
    return load_config()


def get_address_book(
    config: tuple[Settings, UserPrefs] = Depends(get_config),
) -> AddressBook:
    """Load the address book from the configured data file."""
    settings, prefs = config
    storage = JsonAddressBookStorage(settings.resolve_data_file(prefs))
    try:
        book = storage.read_address_book()
    except TrackerError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    return book if book is not None else AddressBook()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Applicant Tracker API",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/persons", response_model=list[PersonRecord])
def list_persons(
    q: list[str] | None = Query(default=None),
    book: AddressBook = Depends(get_address_book),
    config: tuple[Settings, UserPrefs] = Depends(get_config),
):
    """All applicants, or those matching any ``q`` keyword."""
    _, prefs = config
    persons = book.find_persons(q) if q else list(book.persons)
    return [PersonRecord.from_model(p) for p in persons[: prefs.default_search_limit]]


@app.get("/interviews", response_model=list[InterviewRecord])
def list_interviews(book: AddressBook = Depends(get_address_book)):
    return [InterviewRecord.from_model(i) for i in book.interviews]


@app.get("/tasks", response_model=list[TaskRecord])
def list_tasks(book: AddressBook = Depends(get_address_book)):
    return [TaskRecord.from_model(t) for t in book.tasks]
