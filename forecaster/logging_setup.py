"""Process-wide logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Chatty at DEBUG; our own client already logs each request.
QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "DEBUG") -> None:
    """Log to stderr; stdout carries the MCP stream under stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.DEBUG),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
