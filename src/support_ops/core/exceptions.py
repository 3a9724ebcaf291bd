"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

Each exception carries the HTTP status and error category it is rendered with,
so the API boundary can translate any of them into the standard error envelope
without inspecting messages.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    category: str = "Internal server error"

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationException(ApplicationException):
    """Exception for request validation errors."""

    status_code = 400
    category = "Bad request"


class MissingParameterException(ValidationException):
    """A required query parameter was not supplied."""


class InvalidDateException(ValidationException):
    """A date parameter could not be parsed as ISO 8601."""

    def __init__(
        self,
        message: str = "Invalid date format. Use ISO 8601 format (YYYY-MM-DD or YYYY-MM-DDTHH:mm:ss)",
        details: Optional[dict] = None
    ):
        super().__init__(message, details)


class InvalidRangeException(ValidationException):
    """The lower bound of a date range is not before the upper bound."""

    def __init__(
        self,
        message: str = 'Parameter "from" must be before "to"',
        details: Optional[dict] = None
    ):
        super().__init__(message, details)


class ResourceNotFoundException(ApplicationException):
    """Exception when a requested resource is not found."""

    status_code = 404
    category = "Not found"

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type}"
        if resource_id:
            message += f" with ID {resource_id}"
        message += " not found"
        super().__init__(message, details)


class RepositoryException(ApplicationException):
    """Base exception for repository/data access errors."""


class DatabaseUnavailableException(RepositoryException):
    """The store refused the connection or the credentials."""

    category = "Database connection failed"

    def __init__(
        self,
        message: str = "Unable to connect to database. Please check your credentials.",
        details: Optional[dict] = None
    ):
        super().__init__(message, details)


class QueryTimeoutException(RepositoryException):
    """A pooled connection or a statement exceeded its time limit."""

    status_code = 504
    category = "Request timeout"

    def __init__(
        self,
        message: str = "Database query exceeded timeout limit",
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
