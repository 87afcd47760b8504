"""Attio MCP Server: process entry point and startup lifecycle.

Invariants:
    - Credential checked before anything touches the transport
    - Missing credential, transport failure or any unhandled fault: exit code 1
    - stdin closed by the caller: exit code 0
    - One AttioClient per process, closed on the way out

Design Decisions:
    - serve() returns an exit code instead of calling sys.exit: main() is the
      only place the process terminates, serve() stays testable
    - Logging configured before the credential check so the fatal path is logged
"""

import asyncio
import logging
import sys
from contextlib import AsyncExitStack

from attio_mcp.config import API_KEY_VARIABLE, Settings, get_settings
from attio_mcp.core.errors import MissingCredentialError, TransportFailureError
from attio_mcp.core.lifecycle import Lifecycle
from attio_mcp.infrastructure.attio_client import AttioClient, AttioClientConfig
from attio_mcp.infrastructure.mcp_transport import build_server, open_stdio, run_server
from attio_mcp.infrastructure.observability import setup_logging
from attio_mcp.services.request_router import RequestRouter

logger = logging.getLogger(__name__)


async def serve(settings: Settings, lifecycle: Lifecycle | None = None) -> int:
    """Run the startup state machine, then serve until stdin closes."""
    lifecycle = lifecycle or Lifecycle()
    try:
        api_key = lifecycle.check_credential(settings.attio_api_key, API_KEY_VARIABLE)
    except MissingCredentialError as e:
        logger.critical(f"Error starting server: {e.message}", extra={"error_code": e.code})
        return 1

    config = AttioClientConfig(base_url=settings.attio_base_url, api_key=api_key)
    async with AsyncExitStack() as stack:
        client = await stack.enter_async_context(AttioClient(config))
        server = build_server(
            RequestRouter(client), settings.server_name, settings.server_version,
        )
        try:
            read_stream, write_stream = await open_stdio(stack)
        except TransportFailureError as e:
            logger.critical(f"Error starting server: {e.message}", extra={"error_code": e.code})
            return 1
        lifecycle.transport_connected()
        lifecycle.serving()
        logger.info(
            f"{settings.server_name} {settings.server_version} started",
            extra={"url": settings.attio_base_url},
        )
        await run_server(server, read_stream, write_stream)

    logger.info("Transport closed, shutting down")
    return 0


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        exit_code = asyncio.run(serve(settings))
    except Exception as e:
        logger.critical(f"Unhandled error: {e}", exc_info=True)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
