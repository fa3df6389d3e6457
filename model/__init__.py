"""
Domain model for the applicant tracker.

Value objects are validated on construction; entities are immutable and
are replaced, never mutated, inside the AddressBook.
"""

from .address_book import AddressBook
from .application import Application, Job, PipelineStage, Stage
from .fields import Address, Email, Name, Phone
from .interview import Interview
from .person import Person
from .predicates import PersonContainsKeywordsPredicate
from .task import Task

__all__ = [
    # Value objects
    "Name",
    "Phone",
    "Email",
    "Address",
    "Job",
    "Stage",
    "PipelineStage",
    "Application",
    # Entities
    "Person",
    "Interview",
    "Task",
    "AddressBook",
    "PersonContainsKeywordsPredicate",
]
