"""API version 1."""

from content_admin.api.v1.router import api_router

__all__ = ["api_router"]
