"""
Error taxonomy for catalogue operations.

Every failure raised by the service layer is a ``BookwiseError``.  The
classes derive from ``ValueError`` so callers that only care about
"the operation was rejected" can keep catching ``ValueError``.  Each
class carries the HTTP status code the API layer answers with.
"""

from fastapi import status


class BookwiseError(ValueError):
    """Base class for rejected catalogue operations."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request rejected"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidCredentials(BookwiseError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials."


class AlreadyExists(BookwiseError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User with this email already exists."


class NotFound(BookwiseError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Unauthorized(BookwiseError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(BookwiseError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"
