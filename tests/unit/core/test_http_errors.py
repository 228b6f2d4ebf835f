"""Tests for the handle_http_errors retry decorator."""

import ssl
from unittest.mock import AsyncMock, patch

import pytest

from core.errors import APIError, ValidationError
from core.utils import TransientNetworkError, handle_http_errors


def _flaky(failures, result="ok"):
    """Build a coroutine mock that raises SSL errors before succeeding."""
    return AsyncMock(side_effect=[ssl.SSLError("handshake") for _ in range(failures)] + [result])


def _decorate(call, **kwargs):
    @handle_http_errors("op", **kwargs)
    async def operation():
        return await call()

    return operation


class TestSslRetry:
    @pytest.mark.asyncio
    async def test_write_is_not_retried(self):
        call = _flaky(1)
        wrapped = _decorate(call)

        with patch("core.utils.asyncio.sleep", new=AsyncMock()) as sleep:
            with pytest.raises(TransientNetworkError) as exc_info:
                await wrapped()

        assert call.await_count == 1
        sleep.assert_not_awaited()
        assert isinstance(exc_info.value.__cause__, ssl.SSLError)

    @pytest.mark.asyncio
    async def test_read_only_is_retried_with_backoff(self):
        call = _flaky(2)
        wrapped = _decorate(call, is_read_only=True)

        with patch("core.utils.asyncio.sleep", new=AsyncMock()) as sleep:
            assert await wrapped() == "ok"

        assert call.await_count == 3
        assert [c.args[0] for c in sleep.await_args_list] == [1, 2]

    @pytest.mark.asyncio
    async def test_read_only_gives_up_after_max_retries(self):
        call = _flaky(3)
        wrapped = _decorate(call, is_read_only=True)

        with patch("core.utils.asyncio.sleep", new=AsyncMock()):
            with pytest.raises(TransientNetworkError, match="after 3 attempt"):
                await wrapped()

        assert call.await_count == 3


class TestErrorPassthrough:
    @pytest.mark.asyncio
    async def test_compiler_errors_propagate_unchanged(self):
        error = ValidationError("bad id")
        wrapped = _decorate(AsyncMock(side_effect=error))
        with pytest.raises(ValidationError) as exc_info:
            await wrapped()
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_unexpected_errors_become_api_errors(self):
        wrapped = _decorate(AsyncMock(side_effect=RuntimeError("boom")))
        with pytest.raises(APIError, match="unexpected error occurred in op: boom"):
            await wrapped()
