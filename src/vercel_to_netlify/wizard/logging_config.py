"""
Migrator Logging Configuration

Diagnostics go to stderr through the ``vercel_to_netlify`` logger tree;
user-facing output goes through rich. Every handler masks secret values,
since migrated .env content passes through debug messages.
"""

import os
import logging
import sys
from pathlib import Path
from typing import Optional

from vercel_to_netlify.wizard.ui import mask_secrets


DEBUG_MODE = os.environ.get("V2N_DEBUG", "").lower() in ("1", "true", "yes")

LOGGER_NAME = "vercel_to_netlify"

PLAIN_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d: %(message)s"


class SecretMaskingFormatter(logging.Formatter):
    """Masks KEY=value secrets and known token formats after formatting."""

    def format(self, record: logging.LogRecord) -> str:
        return mask_secrets(super().format(record))


def _level_from_env() -> Optional[int]:
    name = os.environ.get("V2N_LOG_LEVEL", "").upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else None


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(SecretMaskingFormatter(fmt))
    return handler


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    quiet: bool = False
) -> logging.Logger:
    """Configure the migrator logger.

    Args:
        level: Explicit level; otherwise V2N_LOG_LEVEL, then DEBUG when
            V2N_DEBUG is set, then INFO
        log_file: Also write DEBUG records here (default: $V2N_LOG_FILE)
        quiet: Drop the stderr handler

    Returns:
        The ``vercel_to_netlify`` logger
    """
    if level is None:
        level = _level_from_env()
    if level is None:
        level = logging.DEBUG if DEBUG_MODE else logging.INFO

    if log_file is None and os.environ.get("V2N_LOG_FILE"):
        log_file = Path(os.environ["V2N_LOG_FILE"]).expanduser()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(level, logging.DEBUG) if log_file else level)
    logger.handlers.clear()

    if not quiet:
        fmt = DEBUG_FORMAT if DEBUG_MODE else PLAIN_FORMAT
        logger.addHandler(_handler(logging.StreamHandler(sys.stderr), level, fmt))

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_handler(logging.FileHandler(log_file), logging.DEBUG, FILE_FORMAT))

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger under the ``vercel_to_netlify`` hierarchy."""
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


# Shown by `vercel-to-netlify help server`
ENV_VARS = {
    "V2N_DEBUG": {
        "description": "Verbose, timestamped diagnostics",
        "values": ["1", "true", "yes"],
        "default": "false"
    },
    "V2N_LOG_LEVEL": {
        "description": "Diagnostic level",
        "values": ["DEBUG", "INFO", "WARNING", "ERROR"],
        "default": "INFO"
    },
    "V2N_LOG_FILE": {
        "description": "Also write debug diagnostics to this file",
        "default": "unset"
    },
    "V2N_HOST": {
        "description": "Interface the migration API binds to",
        "default": "127.0.0.1"
    },
    "PORT": {
        "description": "Port the migration API listens on",
        "default": "3001"
    },
}
