"""Use cases: admin facade over schema metadata and the content endpoint."""

from content_admin.application.use_cases.admin_facade import AdminFacade

__all__ = ["AdminFacade"]
