"""Error catalog for the roster server.

The taxonomy is flat: every error maps to one HTTP status and a short
plain-text message, and is terminal for the request.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ErrorCode:
    """A stable error: machine code, HTTP status and response message."""

    code: str
    status_code: int
    default_message: str


# Method errors
METHOD_NOT_ALLOWED = ErrorCode(
    code="METHOD_NOT_ALLOWED",
    status_code=405,
    default_message="Method not allowed",
)

# Validation errors
NAME_REQUIRED = ErrorCode(
    code="NAME_REQUIRED",
    status_code=400,
    default_message="Name is required",
)

NAME_EXISTS = ErrorCode(
    code="NAME_EXISTS",
    status_code=400,
    default_message="Mahasiswa already exists",
)

# Infrastructure errors
NO_BUILD_INFO = ErrorCode(
    code="NO_BUILD_INFO",
    status_code=500,
    default_message="no build information available",
)


class RosterError(Exception):
    """Raised by handlers and the store; rendered by the server as plain text."""

    def __init__(self, error: ErrorCode, message: str | None = None) -> None:
        self.error = error
        self.message = message if message is not None else error.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.error.status_code


class DuplicateNameError(RosterError):
    def __init__(self, name: str) -> None:
        super().__init__(NAME_EXISTS)
        self.name = name
