"""
Custom error types for the Google Docs request compiler.

Provides user-friendly error messages and structured error handling.
"""

from dataclasses import dataclass
from typing import Any

# =============================================================================
# Base Exception Hierarchy
# =============================================================================


@dataclass
class DocsCompilerError(Exception):
    """Base exception for all compiler and transport errors."""

    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


@dataclass
class ServiceConfigurationError(DocsCompilerError):
    """Raised when the Docs service cannot be built from the configuration."""

    pass


# =============================================================================
# Validation Errors
# =============================================================================


@dataclass
class ValidationError(DocsCompilerError):
    """Raised when top-level input validation fails."""

    pass


@dataclass
class EmptyInputError(ValidationError):
    """Raised when a top-level entry point receives an empty document."""

    input_kind: str = ""
    message: str = ""

    def __post_init__(self):
        if not self.message:
            self.message = f"{self.input_kind} input must be a non-empty string"


# =============================================================================
# Conversion Errors
# =============================================================================


@dataclass
class ConversionError(DocsCompilerError):
    """Raised when markup cannot be turned into document requests."""

    stage: str | None = None


# =============================================================================
# API Errors
# =============================================================================


@dataclass
class APIError(DocsCompilerError):
    """Raised for Google Docs API errors during batch submission."""

    status_code: int | None = None


@dataclass
class PermissionDeniedError(APIError):
    """Raised when the caller lacks permission on the target document (403)."""

    pass


@dataclass
class ResourceNotFoundError(APIError):
    """Raised when the target document doesn't exist (404)."""

    pass


@dataclass
class RateLimitError(APIError):
    """Raised when API rate limits are exceeded (429)."""

    pass


def handle_http_error(error: Exception, document_id: str | None = None) -> APIError:
    """
    Convert a Google API HTTP error into the matching APIError subclass.
    """
    status = getattr(getattr(error, "resp", None), "status", None)
    error_str = str(error)

    if status == 404 or (status is None and "404" in error_str):
        return ResourceNotFoundError(
            message=f"Document not found: {document_id or 'unknown'}", details=error, status_code=404
        )
    elif status == 403 or (status is None and "403" in error_str):
        return PermissionDeniedError(
            message="Permission denied. You may not have write access to this document.",
            details=error,
            status_code=403,
        )
    elif status == 429 or (status is None and "429" in error_str):
        return RateLimitError(
            message="Rate limit exceeded. Please wait and try again.", details=error, status_code=429
        )
    else:
        return APIError(message=f"Google API error: {error_str}", details=error, status_code=status)


def format_error(operation: str, error: DocsCompilerError) -> str:
    """Format an error for display to the user."""
    return f"{operation} failed: {error.message}"
