"""Precondition helpers shared by entity constructors."""

from __future__ import annotations

from typing import Any

from core.exceptions import ValidationError


def require_all_present(**fields: Any) -> None:
    """Raise ValidationError naming the first field that is None."""
    for field, value in fields.items():
        if value is None:
            raise ValidationError(field, "is required")
