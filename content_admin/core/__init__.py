"""Core: config, exception handlers, and application lifespan."""

from content_admin.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
