"""Domain error base shared by every app.

Each app declares its own ``ErrorCode`` enum and raises subclasses of the
kind-specific bases below. The kind is the only thing the HTTP boundary
looks at when choosing a status code.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Categories of domain failure."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    BAD_REQUEST = "BAD_REQUEST"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code, kind and user-safe message."""

    code: Enum
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    def __init__(self, code: Enum, message: str) -> None:
        super().__init__(code=code, kind=ErrorKind.NOT_FOUND, message=message)


class ConflictError(DomainError):
    def __init__(self, code: Enum, message: str) -> None:
        super().__init__(code=code, kind=ErrorKind.CONFLICT, message=message)


class BadRequestError(DomainError):
    def __init__(self, code: Enum, message: str) -> None:
        super().__init__(code=code, kind=ErrorKind.BAD_REQUEST, message=message)
