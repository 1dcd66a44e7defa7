"""Validation of post and comment submissions."""

from collections.abc import Mapping
from typing import Any

from social.domain.validation.common import (
    ValidationResult,
    as_mapping,
    normalize_text,
)

DEFAULT_MIN_LENGTH = 1
DEFAULT_MAX_LENGTH = 300

POST_FIELDS = ("text", "name", "avatar")


def validate_post_input(
    data: Mapping[str, Any] | None,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> ValidationResult:
    """Validate a ``{text, name, avatar}`` submission.

    Used for both new posts and comments. Absent, null and blank fields are
    normalized to ``""`` before any rule runs.

    Args:
        data: Raw submission (may be None or missing keys)
        min_length: Minimum length of ``text``
        max_length: Maximum length of ``text``

    Returns:
        Result with the normalized record and any field errors
    """
    raw = as_mapping(data)
    cleaned = {field: normalize_text(raw.get(field)) for field in POST_FIELDS}
    errors: dict[str, str] = {}

    text = cleaned["text"]
    if not text:
        errors["text"] = "Text field is required"
    elif not min_length <= len(text) <= max_length:
        errors["text"] = (
            f"Post must be between {min_length} and {max_length} characters"
        )

    return ValidationResult(errors=errors, data=cleaned)
