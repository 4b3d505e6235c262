"""
Domain-specific exceptions for the booking platform.

Services raise these with business-focused messages; the API layer turns
them into HTTP responses through the handler registered in main.py.
"""

from typing import Any, Optional

from fastapi import HTTPException, status


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.message)


class NotFoundException(DomainException):
    """Raised when a requested or referenced resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ValidationException(DomainException):
    """Raised when input is malformed or relationships don't line up."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictException(DomainException):
    """Raised on optimistic-concurrency failures and constraint clashes."""

    status_code = status.HTTP_409_CONFLICT


class UnauthorizedException(DomainException):
    """Raised when the access gate rejects the caller."""

    status_code = status.HTTP_401_UNAUTHORIZED
