"""
Logging configuration for the football backend.

Call ``setup_logging()`` once at application startup; every module then
uses a plain module logger::

    logger = logging.getLogger(__name__)
    logger.info("Match %s completed", match.id)
"""

import logging
import sys
from typing import Optional

from football_backend.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Attach a console handler to the package logger (idempotent)."""
    global _configured

    root = logging.getLogger("football_backend")
    root.setLevel((level or LOG_LEVEL).upper())

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.propagate = False

    # Keep SQLAlchemy quiet unless SQL echo is explicitly requested
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _configured = True
