"""Validation of profile education entries."""

from collections.abc import Mapping
from typing import Any

from social.domain.error import InvalidInputError
from social.domain.model.education import Education
from social.domain.validation.common import (
    ValidationResult,
    as_mapping,
    is_empty,
    normalize_text,
)

# Keyed by the submitted field names
REQUIRED_FIELDS = {
    "school": "School field is required",
    "degree": "Degree field is required",
    "from": "From date field is required",
    "fieldOfStudy": "Field of study field is required",
}

TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})


def parse_flag(value: Any) -> bool:
    """Read a checkbox-style flag; unknown strings count as unset."""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def _optional_text(value: Any) -> str | None:
    return None if is_empty(value) else normalize_text(value)


def validate_education_input(data: Mapping[str, Any] | None) -> ValidationResult:
    """Validate an education entry.

    Every required field is checked independently, so a submission missing
    all of them reports four errors.
    """
    raw = as_mapping(data)
    cleaned: dict[str, Any] = {
        field: normalize_text(raw.get(field)) for field in REQUIRED_FIELDS
    }
    errors = {
        field: message
        for field, message in REQUIRED_FIELDS.items()
        if not cleaned[field]
    }

    cleaned["to"] = _optional_text(raw.get("to"))
    cleaned["current"] = parse_flag(raw.get("current", False))
    cleaned["description"] = _optional_text(raw.get("description"))

    return ValidationResult(errors=errors, data=cleaned)


def parse_education(data: Mapping[str, Any] | None) -> Education:
    """Validate an education entry and build the domain model.

    Raises:
        InvalidInputError: If any required field is missing
    """
    result = validate_education_input(data)
    if not result.is_valid:
        raise InvalidInputError(result.errors)
    return Education.model_validate(result.data)
