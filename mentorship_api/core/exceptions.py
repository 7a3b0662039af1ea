"""
Exception hierarchy for the mentorship backend.

Raised by the security helpers, repositories, use cases and the Gemini
client. Controllers translate them into HTTP responses; nothing here knows
about status codes.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class MentorshipError(Exception):
    """Base exception for all mentorship backend errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(MentorshipError):
    """Raised when a request cannot be accepted as submitted."""
    pass


class DuplicateEmailError(ValidationError):
    """Raised when an account with the same email already exists for the role."""
    pass


class InvalidCredentialsError(ValidationError):
    """Raised when the supplied password does not match the stored hash."""
    pass


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class AuthError(MentorshipError):
    """Base exception for token and account resolution failures."""
    pass


class MissingTokenError(AuthError):
    """Raised when a protected request carries no token."""
    pass


class InvalidTokenError(AuthError):
    """Raised when a token is malformed, tampered with or expired."""
    pass


class AccountNotFoundError(AuthError):
    """Raised when no account matches the email or id being looked up."""
    pass


# -----------------------------------------------------------------------------
# Upstream
# -----------------------------------------------------------------------------


class UpstreamError(MentorshipError):
    """Raised when the database or the generative-text API cannot serve a request."""
    pass


class DatabaseNotConfiguredError(UpstreamError):
    """Raised when MONGO_URI is missing and a query is attempted."""
    pass


class TokenConfigurationError(UpstreamError):
    """Raised when SECRET_KEY is missing and a token must be issued."""
    pass
