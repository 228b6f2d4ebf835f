"""
Server configuration for the Google Docs request compiler.

All settings come from environment variables so the MCP server can be
configured by its launcher without a config file.
"""

import logging
import os

# Application metadata
GDOCS_COMPILER_APP_NAME = "GDocs HTML Compiler"
DEFAULT_LIST_INDENT_PT = 36.0
DOCS_SCOPE = "https://www.googleapis.com/auth/documents"

_VALID_TRANSPORTS = ("stdio", "http", "sse")


class ServerConfig:
    """
    Centralized configuration management.

    Single source of truth for server name, logging, credentials and
    converter defaults that are not passed per call.
    """

    def __init__(self):
        self.server_name = os.getenv("GDOCS_COMPILER_SERVER_NAME", GDOCS_COMPILER_APP_NAME)

        self.log_level = os.getenv("GDOCS_COMPILER_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"GDOCS_COMPILER_LOG_LEVEL has unknown level '{self.log_level}'")

        raw_indent = os.getenv("GDOCS_COMPILER_LIST_INDENT_PT", str(DEFAULT_LIST_INDENT_PT))
        try:
            self.list_indent_pt = float(raw_indent)
        except ValueError as e:
            raise ValueError(f"GDOCS_COMPILER_LIST_INDENT_PT must be a number, got '{raw_indent}'") from e
        if self.list_indent_pt < 0:
            raise ValueError("GDOCS_COMPILER_LIST_INDENT_PT cannot be negative")

        # Service-account key used by the transport tools
        self.credentials_file = os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or None

        self.transport = os.getenv("GDOCS_COMPILER_TRANSPORT", "stdio").lower()
        if self.transport not in _VALID_TRANSPORTS:
            raise ValueError(f"GDOCS_COMPILER_TRANSPORT must be one of {', '.join(_VALID_TRANSPORTS)}")

    def is_transport_configured(self) -> bool:
        """Check whether credentials for submitting requests are available."""
        return bool(self.credentials_file)

    def get_config_summary(self) -> str:
        """Get a summary of the current configuration for logging."""
        return (
            f"server_name={self.server_name}, log_level={self.log_level}, "
            f"list_indent_pt={self.list_indent_pt}, transport={self.transport}, "
            f"credentials={'configured' if self.credentials_file else 'missing'}"
        )


_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Get the process-wide configuration, creating it on first use."""
    global _config
    if _config is None:
        _config = ServerConfig()
    return _config


def reload_config() -> ServerConfig:
    """Rebuild configuration from the current environment."""
    global _config
    _config = ServerConfig()
    return _config
