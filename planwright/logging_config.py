# planwright/logging_config.py
"""
Logging configuration for the two entry points.

The MCP server uses stdio transport, so ALL of its logging must go to stderr
as JSON lines. The CLI logs human-readable lines to stderr and keeps stdout
for the rendered workflow.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

CLI_FORMAT = "%(asctime)s  %(levelname)-7s  %(message)s"
CLI_DATEFMT = "%H:%M:%S"

_VERBOSITY_LEVELS = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON line."""
        log_data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            log_data["exc"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging() -> None:
    """
    Configure logging to output JSON to stderr only.

    MUST be called before the server starts handling requests.
    Clears existing handlers to prevent stdout pollution.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.INFO)

    for logger_name in ["uvicorn", "fastmcp"]:
        logger = logging.getLogger(logger_name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False  # avoid double logging through root


def configure_cli_logging(verbosity: str = "normal") -> None:
    """
    Configure human-readable stderr logging for CLI commands.

    Args:
        verbosity: quiet, normal or verbose
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(CLI_FORMAT, datefmt=CLI_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_VERBOSITY_LEVELS.get(verbosity, logging.INFO))
