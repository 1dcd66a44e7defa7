"""Submission validators.

The ``validate_*`` functions are pure: they normalize a raw record and
report field errors without raising or touching storage.
"""

from social.domain.validation.common import ValidationResult, is_empty
from social.domain.validation.education import (
    parse_education,
    validate_education_input,
)
from social.domain.validation.post import validate_post_input

__all__ = [
    "ValidationResult",
    "is_empty",
    "parse_education",
    "validate_education_input",
    "validate_post_input",
]
