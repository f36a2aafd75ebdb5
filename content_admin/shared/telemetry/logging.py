"""Logging configuration for the content admin service."""

import logging
import sys

from content_admin.core.config import get_settings


def setup_logging() -> None:
    """Configure process-wide logging once at startup.

    Level is DEBUG when settings.debug is True, otherwise INFO. Records go
    to stdout; modules log through logging.getLogger(__name__), so facade
    recovery messages appear under content_admin.application.use_cases.
    """
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
