"""Domain layer errors.

Every failure surfaced by the post operations carries a machine-readable
``kind`` and a human-readable message.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Kind of failure, stable across transports."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"


class DomainError(Exception):
    """Base domain error."""

    kind: ClassVar[ErrorKind]

    @property
    def message(self) -> str:
        return str(self)


class InvalidInputError(DomainError):
    """Raised when a submission fails field validation.

    Carries the field-level errors so callers can correct their input.
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid input: {fields}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to delete {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when the current state of a resource rejects the operation."""

    kind = ErrorKind.CONFLICT


class AlreadyLikedError(ConflictError):
    """Raised when a user likes a post they already liked."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(f"User {user_id} already liked post {post_id}")


class NotLikedError(ConflictError):
    """Raised when a user unlikes a post they have not liked."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(f"User {user_id} has not yet liked post {post_id}")


class UnavailableError(DomainError):
    """Raised when the persistence backend fails.

    Not retried by the domain; callers decide on retry policy.
    """

    kind = ErrorKind.UNAVAILABLE

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        super().__init__(f"Storage unavailable during {operation}: {reason}")
