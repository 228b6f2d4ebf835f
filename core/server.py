"""
MCP server for the Google Docs request compiler.

Tools register themselves on ``server`` with ``@server.tool()`` when
``gdocs.tools`` is imported; ``main()`` does that and starts the transport.
"""

import logging
import sys
from typing import Any

from fastmcp import FastMCP
from google.oauth2 import service_account
from googleapiclient.discovery import build

from core.config import DOCS_SCOPE, get_config
from core.errors import ServiceConfigurationError

logger = logging.getLogger(__name__)

server = FastMCP(get_config().server_name)


def get_docs_service() -> Any:
    """
    Build a Docs v1 service from the configured service-account key.

    Raises:
        ServiceConfigurationError: If no credentials file is configured.
    """
    config = get_config()
    if not config.is_transport_configured():
        raise ServiceConfigurationError(
            "GOOGLE_APPLICATION_CREDENTIALS is not set; document insertion needs a service-account key"
        )
    credentials = service_account.Credentials.from_service_account_file(config.credentials_file, scopes=[DOCS_SCOPE])
    logger.debug(f"Built Docs service for {credentials.service_account_email}")
    return build("docs", "v1", credentials=credentials, cache_discovery=False)


def main() -> None:
    config = get_config()
    # stdout is the MCP protocol channel
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    import gdocs.tools  # noqa: F401

    logger.info(f"Starting {config.server_name}: {config.get_config_summary()}")
    server.run(transport=config.transport)


if __name__ == "__main__":
    main()
