"""Core utilities for the Google Docs request compiler."""

from core.config import ServerConfig, get_config, reload_config
from core.errors import (
    APIError,
    ConversionError,
    DocsCompilerError,
    EmptyInputError,
    PermissionDeniedError,
    RateLimitError,
    ResourceNotFoundError,
    ServiceConfigurationError,
    ValidationError,
    format_error,
    handle_http_error,
)
from core.utils import (
    TransientNetworkError,
    handle_http_errors,
    validate_document_id,
    validate_markup_input,
    validate_positive_int,
)

__all__ = [
    "APIError",
    "ConversionError",
    "DocsCompilerError",
    "EmptyInputError",
    "format_error",
    "get_config",
    "handle_http_error",
    "handle_http_errors",
    "PermissionDeniedError",
    "RateLimitError",
    "reload_config",
    "ResourceNotFoundError",
    "ServerConfig",
    "ServiceConfigurationError",
    "TransientNetworkError",
    "validate_document_id",
    "validate_markup_input",
    "validate_positive_int",
    "ValidationError",
]
