"""Domain error codes for the events module.

Every error carries a code and a user-safe message. The kind classes
(ValidationError, NotFoundError, AuthorizationError, ConflictError,
StoreError) are what handlers map to HTTP statuses.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT_DATE = "INVALID_EVENT_DATE"
    PAST_EVENT_DATE = "PAST_EVENT_DATE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    NOT_EVENT_CREATOR = "NOT_EVENT_CREATOR"
    ALREADY_JOINED = "ALREADY_JOINED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Input is missing, malformed or out of range."""


class NotFoundError(DomainError):
    """A referenced entity does not exist."""


class AuthorizationError(DomainError):
    """The acting identity may not perform the operation."""


class ConflictError(DomainError):
    """The operation would violate a uniqueness rule."""


class StoreError(DomainError):
    """The underlying store failed; not attributable to the caller."""


class MissingFieldsError(ValidationError):
    """Raised when required input fields are empty or absent."""

    def __init__(self, fields: Sequence[str]) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELDS,
            message=f"Missing required fields: {', '.join(fields)}",
        )
        self.fields = tuple(fields)


class InvalidEventIdError(ValidationError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventDateError(ValidationError):
    """Raised when an event date cannot be parsed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_DATE,
            message="Invalid event date",
        )


class PastEventDateError(ValidationError):
    """Raised when an event date is not strictly in the future."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAST_EVENT_DATE,
            message="Event date must be a future date",
        )


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class NotEventCreatorError(AuthorizationError):
    """Raised when someone other than the creator tries to update an event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_EVENT_CREATOR,
            message="You are not allowed to update this event",
        )


class AlreadyJoinedError(ConflictError):
    """Raised when a user joins an event they already joined."""

    def __init__(self, event_id: str, user_email: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_JOINED,
            message="You have already joined this event",
        )
        self.event_id = event_id
        self.user_email = user_email


class StoreUnavailableError(StoreError):
    """Raised when a store operation fails at the database level."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Storage is temporarily unavailable",
        )
        self.operation = operation
