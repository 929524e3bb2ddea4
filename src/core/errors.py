"""
Custom exceptions and error handling for Wayfarer.

Defines application-specific exceptions with error codes and HTTP-style
status codes for consistent error envelopes across Lambda functions.

Usage:
    from core.errors import NotFoundError, ErrorCode

    raise NotFoundError("User 42 not found", code=ErrorCode.USER_NOT_FOUND)
"""

from enum import Enum

from core.models.responses import ErrorPayload, OperationResult


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Lookup errors
    USER_NOT_FOUND = "USER_NOT_FOUND"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"

    # Request errors
    ALREADY_SAVED = "ALREADY_SAVED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"

    # Upstream errors
    PROVIDER_UNAVAILABLE = "PROVIDER_UNAVAILABLE"

    # System errors
    CACHE_UNAVAILABLE = "CACHE_UNAVAILABLE"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.USER_NOT_FOUND: "Not found.",
    ErrorCode.TRIP_NOT_FOUND: "Not found.",
    ErrorCode.ALREADY_SAVED: "Trip already saved.",
    ErrorCode.VALIDATION_ERROR: "Validation error.",
    ErrorCode.UNAUTHORIZED: "Unauthorized.",
    ErrorCode.PROVIDER_UNAVAILABLE: "Trip provider unavailable.",
    ErrorCode.CACHE_UNAVAILABLE: "Internal server error.",
    ErrorCode.STORE_UNAVAILABLE: "Internal server error.",
    ErrorCode.INTERNAL_ERROR: "Internal server error.",
}

ERROR_DETAILS: dict[ErrorCode, str] = {
    ErrorCode.USER_NOT_FOUND: "User not found, please sign in again.",
    ErrorCode.TRIP_NOT_FOUND: "Trip not found in your saved list, please provide a valid id.",
    ErrorCode.ALREADY_SAVED: "The trip is already in your saved list.",
    ErrorCode.VALIDATION_ERROR: "The request contains invalid parameters, please check and try again.",
    ErrorCode.UNAUTHORIZED: "No authenticated user found for this request.",
    ErrorCode.PROVIDER_UNAVAILABLE: "The trip provider could not fulfil the request, please try again later.",
    ErrorCode.CACHE_UNAVAILABLE: "Internal server error, please try again later.",
    ErrorCode.STORE_UNAVAILABLE: "Internal server error, please try again later.",
    ErrorCode.INTERNAL_ERROR: "Internal server error, please try again later.",
}


class WayfarerError(Exception):
    """Base exception for all Wayfarer errors."""

    status_code: int = 500

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def detail(self) -> str:
        return ERROR_DETAILS.get(self.code, ERROR_DETAILS[ErrorCode.INTERNAL_ERROR])

    def to_result(self) -> OperationResult:
        payload = ErrorPayload(error=self.code.value, message=self.user_message, detail=self.detail)
        return OperationResult(data=payload, code=self.status_code)


class NotFoundError(WayfarerError):
    """User or saved-list entry does not exist."""

    status_code = 404

    def __init__(self, message: str, code: ErrorCode = ErrorCode.USER_NOT_FOUND):
        super().__init__(message, code=code)


class AlreadySavedError(WayfarerError):
    """Trip is already part of the user's saved list."""

    status_code = 400

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ALREADY_SAVED):
        super().__init__(message, code=code)


class ValidationError(WayfarerError):
    """Inbound request parameters failed validation."""

    status_code = 400

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)


class UnauthorizedError(WayfarerError):
    """Request carries no authenticated user."""

    status_code = 401

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNAUTHORIZED):
        super().__init__(message, code=code)


class ProviderUnavailableError(WayfarerError):
    """Trip provider answered with a non-200 status.

    The upstream status is surfaced as-is.
    """

    def __init__(self, message: str, status_code: int, code: ErrorCode = ErrorCode.PROVIDER_UNAVAILABLE):
        super().__init__(message, code=code)
        self.status_code = status_code


class InternalFailureError(WayfarerError):
    """Unexpected failure, including failed creates."""

    pass


class CacheError(InternalFailureError):
    """Cache backend call failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CACHE_UNAVAILABLE):
        super().__init__(message, code=code)


class StoreError(InternalFailureError):
    """Persistent store call failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORE_UNAVAILABLE):
        super().__init__(message, code=code)
