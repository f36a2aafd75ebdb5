"""Admin dependencies (composition root).

The facade is built once in the lifespan and stored on app.state; tests
override get_admin_facade via app.dependency_overrides.
"""

from fastapi import Request

from content_admin.application.use_cases import AdminFacade


def get_admin_facade(request: Request) -> AdminFacade:
    """Return the application-wide AdminFacade."""
    return request.app.state.admin_facade
