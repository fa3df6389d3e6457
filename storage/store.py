"""File-based storage for the address book."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from core.exceptions import MalformedDocumentError
from model.address_book import AddressBook
from storage.records import AddressBookDocument

logger = structlog.get_logger()


class AddressBookStorage(ABC):
    """Abstract base for address book storage."""

    @property
    @abstractmethod
    def file_path(self) -> Path:
        """Location of the stored address book."""

    @abstractmethod
    def read_address_book(self) -> AddressBook | None:
        """Load the address book, or None if nothing is stored yet."""

    @abstractmethod
    def save_address_book(self, book: AddressBook) -> None:
        """Persist the address book."""


class JsonAddressBookStorage(AddressBookStorage):
    """Stores the address book as one JSON document.

    Structure:
        {
            "persons": [...],
            "interviews": [...],
            "tasks": [...]
        }
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def file_path(self) -> Path:
        return self._path

    def read_address_book(self) -> AddressBook | None:
        """Load and validate the document at file_path."""
        if not self._path.exists():
            logger.info("Address book file not found", path=str(self._path))
            return None

        with open(self._path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MalformedDocumentError(
                    f"{self._path.name} is not valid JSON: {e}"
                ) from e

        book = AddressBookDocument.parse(data).to_model()
        logger.info(
            "Loaded address book",
            path=str(self._path),
            persons=len(book.persons),
            interviews=len(book.interviews),
            tasks=len(book.tasks),
        )
        return book

    def save_address_book(self, book: AddressBook) -> None:
        """Write the address book to file_path, creating parent dirs."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = AddressBookDocument.from_model(book).model_dump(mode="json")
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.info(
            "Saved address book",
            path=str(self._path),
            persons=len(book.persons),
        )
