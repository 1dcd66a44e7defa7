"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for posts, comments and profile entries.

    Instances are frozen; changes produce a copy via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)
