"""
Error taxonomy for the Bloglist API.

Every failure a request can end with is one of the ErrorKind variants.
Handlers raise the matching BlogApiError subclass and the exception
handler in main.py turns it into a JSON response using STATUS_BY_KIND.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 400,
}


class BlogApiError(Exception):
    """
    Base class for all expected request failures.

    Attributes:
        kind: Taxonomy variant, decides the HTTP status
        message: Stable, client-facing message
        key: JSON key the message is reported under
    """
    kind: ErrorKind = None
    default_message: str = "request failed"

    def __init__(self, message: str = None, key: str = "error"):
        self.message = message or self.default_message
        self.key = key
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict:
        return {self.key: self.message}


class ValidationFailure(BlogApiError):
    """Missing or malformed input."""
    kind = ErrorKind.VALIDATION
    default_message = "invalid request"


class MalformedId(ValidationFailure):
    """Path identifier that cannot name any record."""
    default_message = "malformatted id"


class AuthenticationFailure(BlogApiError):
    """Bad credentials or an unusable token."""
    kind = ErrorKind.AUTHENTICATION
    default_message = "authentication required"


class InvalidToken(AuthenticationFailure):
    default_message = "invalid token"


class TokenExpired(AuthenticationFailure):
    default_message = "token expired"


class AuthorizationFailure(BlogApiError):
    """Known caller without permission for the target resource."""
    kind = ErrorKind.AUTHORIZATION
    default_message = "permission denied"


class NotFound(BlogApiError):
    kind = ErrorKind.NOT_FOUND
    default_message = "not found"


class ConflictFailure(BlogApiError):
    """Uniqueness violation."""
    kind = ErrorKind.CONFLICT
    default_message = "conflict"
