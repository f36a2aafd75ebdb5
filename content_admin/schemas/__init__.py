"""API request/response schemas (pydantic)."""

from content_admin.schemas.admin import (
    AuthStatusResponse,
    CollectionResponse,
    DocumentCreateRequest,
    DocumentUpdateRequest,
)
from content_admin.schemas.health import HealthResponse

__all__ = [
    "AuthStatusResponse",
    "CollectionResponse",
    "DocumentCreateRequest",
    "DocumentUpdateRequest",
    "HealthResponse",
]
