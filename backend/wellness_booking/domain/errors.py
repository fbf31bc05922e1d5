"""Domain error codes for the booking core."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes, each with the HTTP status it surfaces as."""

    VALIDATION = ("VALIDATION", 400)
    INVALID_STATE = ("INVALID_STATE", 400)
    UNAUTHENTICATED = ("UNAUTHENTICATED", 401)
    FORBIDDEN = ("FORBIDDEN", 403)
    NOT_FOUND = ("NOT_FOUND", 404)
    SERVER_ERROR = ("SERVER_ERROR", 500)

    @property
    def status_code(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value[0]}: {self.message}"

    @property
    def status_code(self) -> int:
        return self.code.status_code


class ValidationError(DomainError):
    """Raised when input is malformed, missing or inconsistent."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message=message)


class InvalidState(DomainError):
    """Raised when an operation is not legal in the event's current state."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_STATE, message=message)


class Unauthenticated(DomainError):
    """Raised when the bearer token is missing or cannot be verified."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(code=ErrorCode.UNAUTHENTICATED, message=message)


class Forbidden(DomainError):
    """Raised when the caller is authenticated but not allowed to act."""

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class NotFound(DomainError):
    """Raised when an event or event type does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class ServerError(DomainError):
    """Unexpected failure. The message never carries internals."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.SERVER_ERROR, message="Server error")
