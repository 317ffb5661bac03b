"""Errors raised by the Trello client.

Every error propagates to the caller; the library never retries. ``ApiError``
carries enough detail (status, classification, body fragment) for callers to
decide on retry and backoff themselves.
"""

from enum import Enum
from typing import Optional


class ErrorStatus(Enum):
    """Classification of failed API calls.

    Attributes:
        TRANSIENT_ERROR: May succeed on retry (5xx, rate limiting)
        PERMANENT_ERROR: Will not succeed on retry (validation, bad request)
        UNAUTHORIZED: Credentials missing or rejected
        NOT_FOUND: Resource not found
    """

    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


def classify_status_code(status_code: int) -> ErrorStatus:
    """Map an HTTP status code to an ErrorStatus.

    Status Code Mapping:
    - 401, 403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 429, 5xx: TRANSIENT_ERROR
    - Other: PERMANENT_ERROR
    """
    if status_code in (401, 403):
        return ErrorStatus.UNAUTHORIZED
    if status_code == 404:
        return ErrorStatus.NOT_FOUND
    if status_code == 429 or 500 <= status_code < 600:
        return ErrorStatus.TRANSIENT_ERROR
    return ErrorStatus.PERMANENT_ERROR


class TrelloError(Exception):
    """Base class for all client errors."""


class ConfigurationError(TrelloError):
    """Raised when the client cannot be used as configured.

    Either no usable HTTP transport is installed, or the credentials a call
    needs are absent. Raised before any request leaves the process.
    """


class TransportError(TrelloError):
    """Network-level failure: timeout, refused connection, DNS."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NotSavedError(TrelloError):
    """Raised when an operation needs an entity id and the entity has none."""


class ApiError(TrelloError):
    """Non-success response from the Trello API.

    Attributes:
        status_code: HTTP status code, or None for errors detected locally
        message: Server-provided message (truncated)
        body: Raw response body fragment
        status: ErrorStatus classification
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.status = (
            classify_status_code(status_code)
            if status_code is not None
            else ErrorStatus.PERMANENT_ERROR
        )

    @property
    def retryable(self) -> bool:
        return self.status == ErrorStatus.TRANSIENT_ERROR

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"


class InvalidAccessToken(ApiError):
    """The server rejected the credentials (HTTP 401). Get a new token."""


class NotFoundError(ApiError):
    """The requested resource does not exist (HTTP 404 or empty response)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, body=body)
        self.status = ErrorStatus.NOT_FOUND
