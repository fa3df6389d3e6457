"""
Applicant field value objects.

Immutable wrappers around validated strings. Each raises
ValidationError on construction when the raw value breaks its rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.exceptions import ValidationError


@dataclass(frozen=True)
class Name:
    """Applicant name: alphanumerics and spaces, not blank."""

    value: str

    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    _PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*\Z")

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError("name", self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return isinstance(value, str) and bool(cls._PATTERN.match(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """Phone number: digits only, at least 3 long."""

    value: str

    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    _PATTERN = re.compile(r"[0-9]{3,}\Z")

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError("phone", self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return isinstance(value, str) and bool(cls._PATTERN.match(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """Email address of the form local-part@domain."""

    value: str

    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain. The local-part should "
        "only contain alphanumeric characters and these special characters: +_.-, "
        "and may not start or end with a special character. The domain is made of "
        "labels separated by periods; each label starts and ends with an "
        "alphanumeric character, may contain hyphens, and the last label is at "
        "least 2 characters long."
    )
    _LOCAL = r"[a-zA-Z0-9](?:[a-zA-Z0-9+_.-]*[a-zA-Z0-9])?"
    _LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?"
    _PATTERN = re.compile(
        rf"{_LOCAL}@(?:{_LABEL}\.)*[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])\Z"
    )

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError("email", self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return isinstance(value, str) and bool(cls._PATTERN.match(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """Free-form address; must not start with whitespace."""

    value: str

    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    _PATTERN = re.compile(r"\S.*\Z", re.DOTALL)

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError("address", self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return isinstance(value, str) and bool(cls._PATTERN.match(value))

    def __str__(self) -> str:
        return self.value
