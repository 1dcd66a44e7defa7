"""Repository interfaces for the social domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from social.domain.repository.post import PostRepository, PostSortOrder

__all__ = [
    "PostRepository",
    "PostSortOrder",
]
