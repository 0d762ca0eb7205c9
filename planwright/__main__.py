# planwright/__main__.py
"""
Entry point for the planwright MCP server.

CRITICAL: Server imports configure_logging() first to prevent stdout pollution.
"""

import asyncio
import logging

# Import server (which configures logging before anything else)
from planwright.server import get_config, mcp

logger = logging.getLogger(__name__)


async def main() -> None:
    """Load configuration, then serve MCP over stdio."""
    get_config()

    logger.info("Starting MCP server on stdio transport")
    await mcp.run_stdio_async()


if __name__ == "__main__":
    asyncio.run(main())
