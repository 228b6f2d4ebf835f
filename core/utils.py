import asyncio
import functools
import logging
import re
import ssl
from dataclasses import dataclass

from googleapiclient.errors import HttpError

from core.errors import APIError, DocsCompilerError, EmptyInputError, ValidationError, handle_http_error

logger = logging.getLogger(__name__)

_DOCUMENT_ID_PATTERN = re.compile(r"^[\w\-]+$")


def validate_markup_input(value: object, input_kind: str) -> str:
    """Validate a top-level HTML or Markdown input string."""
    if not isinstance(value, str):
        raise ValidationError(f"{input_kind} input must be a string, got {type(value).__name__}")
    if not value:
        raise EmptyInputError(input_kind=input_kind)
    return value


def validate_document_id(document_id: object, param_name: str = "document_id") -> str:
    """Validate a Google Docs document ID."""
    if not isinstance(document_id, str) or not document_id.strip():
        raise ValidationError(f"{param_name} is required")

    document_id = document_id.strip()
    if not _DOCUMENT_ID_PATTERN.match(document_id):
        raise ValidationError(f"{param_name} contains invalid characters")

    return document_id


def validate_positive_int(value: int, param_name: str, max_value: int | None = None) -> int:
    """Validate a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{param_name} must be a positive integer")

    if max_value is not None and value > max_value:
        raise ValidationError(f"{param_name} cannot exceed {max_value}")

    return value


@dataclass
class TransientNetworkError(DocsCompilerError):
    """Custom exception for transient network errors after retries."""

    pass


def handle_http_errors(operation_name: str, is_read_only: bool = False, document_id_param: str = "document_id"):
    """
    A decorator to handle Google API HttpErrors and transient SSL errors in a standardized way.

    It wraps an async transport function, catches HttpError, logs a detailed error
    message, and raises the matching APIError subclass.

    If is_read_only is True, it will also retry ssl.SSLError with exponential
    backoff. After exhausting retries, or on the first SSL error of a write, it
    raises a TransientNetworkError.

    Args:
        operation_name (str): The name of the operation being decorated (e.g., 'batch_update_doc').
        is_read_only (bool): If True, the operation is considered safe to retry on
                             transient network errors. Defaults to False.
        document_id_param (str): Keyword argument holding the target document ID, used in messages.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            max_retries = 3
            base_delay = 1

            for attempt in range(max_retries):
                try:
                    return await func(*args, **kwargs)
                except ssl.SSLError as e:
                    if is_read_only and attempt < max_retries - 1:
                        delay = base_delay * (2**attempt)
                        logger.warning(
                            f"SSL error in {operation_name} on attempt {attempt + 1}: {e}. Retrying in {delay} seconds..."
                        )
                        await asyncio.sleep(delay)
                    else:
                        logger.error(f"SSL error in {operation_name} on attempt {attempt + 1}: {e}. Raising exception.")
                        raise TransientNetworkError(
                            f"A transient SSL error occurred in '{operation_name}' after {attempt + 1} attempt(s). "
                            "This is likely a temporary network or certificate issue. Please try again shortly.",
                            details=e,
                        ) from e
                except HttpError as error:
                    document_id = kwargs.get(document_id_param)
                    translated = handle_http_error(error, document_id)
                    logger.error(f"API error in {operation_name}: {error}", exc_info=True)
                    raise type(translated)(
                        f"API error in {operation_name}: {translated}",
                        details=error,
                        status_code=translated.status_code,
                    ) from error
                except DocsCompilerError:
                    raise
                except Exception as e:
                    message = f"An unexpected error occurred in {operation_name}: {e}"
                    logger.exception(message)
                    raise APIError(message, details=e) from e

        return wrapper

    return decorator
