"""Persistence: JSON record schemas and file storage."""

from .records import (
    AddressBookDocument,
    ApplicationRecord,
    InterviewRecord,
    PersonRecord,
    TaskRecord,
)
from .store import AddressBookStorage, JsonAddressBookStorage

__all__ = [
    "AddressBookDocument",
    "ApplicationRecord",
    "PersonRecord",
    "InterviewRecord",
    "TaskRecord",
    "AddressBookStorage",
    "JsonAddressBookStorage",
]
