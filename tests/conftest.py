"""Shared pytest fixtures for gdocs-html-compiler tests."""

from unittest.mock import MagicMock

import pytest
from bs4 import BeautifulSoup


@pytest.fixture
def mock_docs_service():
    """Create a mock Google Docs service."""
    service = MagicMock()
    service.documents.return_value.batchUpdate.return_value.execute.return_value = {
        "documentId": "doc123",
        "replies": [{}],
    }
    return service


@pytest.fixture
def soup():
    """Parse an HTML string the way the converter does."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture
def env_override(monkeypatch):
    """Helper to override environment variables."""

    def _override(**kwargs):
        for key, value in kwargs.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    return _override
