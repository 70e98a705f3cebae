from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for attendance run failures."""

    def __init__(self, message: str, *, detail: Optional[str] = None):
        super().__init__(message)
        self.detail = detail


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidArgumentError(ValidationError):
    """Raised when the CLI action is missing or unknown."""


class AuthenticationError(DomainError):
    """Raised when sign-in fails (network, HTTP status, or no token)."""


class TokenNotFoundError(AuthenticationError):
    """Sign-in answered 2xx but no token was found in the body."""

    def __init__(self, message: str, *, body: Any = None):
        super().__init__(message)
        self.body = body


class ResolutionError(DomainError):
    """Raised when no open attendance record exists for check-out."""


class SubmissionError(DomainError):
    """Raised after a failed check-in/check-out has been logged."""

    def __init__(self, message: str, *, result: Any = None, detail: Optional[str] = None):
        super().__init__(message, detail=detail)
        self.result = result
