"""Tests for custom error classes."""

from types import SimpleNamespace

import pytest

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
from core.utils import TransientNetworkError


class TestErrorHierarchy:
    """Test error class inheritance."""

    def test_base_error_is_exception(self):
        assert issubclass(DocsCompilerError, Exception)

    def test_validation_error_inherits_base(self):
        assert issubclass(ValidationError, DocsCompilerError)

    def test_empty_input_is_validation_error(self):
        assert issubclass(EmptyInputError, ValidationError)

    def test_conversion_error_inherits_base(self):
        assert issubclass(ConversionError, DocsCompilerError)

    def test_configuration_error_inherits_base(self):
        assert issubclass(ServiceConfigurationError, DocsCompilerError)

    @pytest.mark.parametrize("cls", [PermissionDeniedError, ResourceNotFoundError, RateLimitError])
    def test_api_subclasses(self, cls):
        assert issubclass(cls, APIError)

    def test_transient_network_error_inherits_base(self):
        assert issubclass(TransientNetworkError, DocsCompilerError)


class TestErrorMessages:
    def test_empty_input_message(self):
        error = EmptyInputError(input_kind="Markdown")
        assert str(error) == "Markdown input must be a non-empty string"
        assert error.input_kind == "Markdown"

    def test_conversion_error_stage(self):
        error = ConversionError("bad", stage="html")
        assert str(error) == "bad"
        assert error.stage == "html"

    def test_api_error_with_status_code(self):
        error = APIError("Test error", status_code=500)
        assert error.status_code == 500
        assert str(error) == "Test error"

    def test_details_default_to_none(self):
        error = ValidationError("bad id")
        assert error.message == "bad id"
        assert error.details is None

    def test_explicit_message_overrides_empty_input_default(self):
        assert str(EmptyInputError(message="custom", input_kind="HTML")) == "custom"

    def test_api_error_is_catchable_as_base(self):
        with pytest.raises(DocsCompilerError):
            raise APIError("Test")

    def test_format_error(self):
        assert format_error("Insert HTML", ValidationError("bad id")) == "Insert HTML failed: bad id"


class TestHandleHttpError:
    """Mapping of HTTP statuses to APIError subclasses."""

    @staticmethod
    def _error(status):
        error = Exception(f"<HttpError {status}>")
        error.resp = SimpleNamespace(status=status)
        return error

    def test_not_found(self):
        error = self._error(404)
        result = handle_http_error(error, "doc123")
        assert isinstance(result, ResourceNotFoundError)
        assert "doc123" in str(result)
        assert result.status_code == 404
        assert result.details is error

    def test_permission_denied(self):
        assert isinstance(handle_http_error(self._error(403)), PermissionDeniedError)

    def test_rate_limit(self):
        assert isinstance(handle_http_error(self._error(429)), RateLimitError)

    def test_other_status(self):
        result = handle_http_error(self._error(500))
        assert type(result) is APIError
        assert result.status_code == 500

    def test_status_from_message(self):
        assert isinstance(handle_http_error(Exception("returned 404 Not Found")), ResourceNotFoundError)
