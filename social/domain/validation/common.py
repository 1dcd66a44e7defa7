"""Shared helpers for submission validators."""

from collections.abc import Mapping, Sized
from typing import Any

from pydantic import Field

from social.domain.value import ValueObject


class ValidationResult(ValueObject):
    """Outcome of validating a raw submission.

    ``data`` holds the normalized record; ``errors`` maps a field name to a
    single message.
    """

    errors: dict[str, str] = Field(default_factory=dict)
    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def is_empty(value: Any) -> bool:
    """Return True for None, blank strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def normalize_text(value: Any) -> str:
    """Coerce a raw field to a string; empty values become ``""``."""
    if is_empty(value):
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def as_mapping(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return data if data is not None else {}
