"""Repository implementations."""

from .post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
