"""Domain model entities."""

from social.domain.model.education import Education
from social.domain.model.post import Comment, Like, Post

__all__ = [
    "Post",
    "Like",
    "Comment",
    "Education",
]
