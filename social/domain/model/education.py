"""Education entry of a user profile.

Profiles themselves are managed elsewhere; this model is the cleaned
output of ``validate_education_input``. Submissions use the camelCase
keys ``from``, ``to`` and ``fieldOfStudy``.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from social.domain.model.common import DomainModel


class Education(DomainModel):
    """A school attended by the user."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field_of_study: str = Field(min_length=1, alias="fieldOfStudy")
    from_date: str = Field(min_length=1, alias="from")
    to_date: Optional[str] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None
