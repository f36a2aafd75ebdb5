"""Telemetry: logging setup."""

from content_admin.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
