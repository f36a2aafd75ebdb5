"""Admin API schemas (collections and documents)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AuthStatusResponse(BaseModel):
    """Response for GET /admin/auth."""

    authenticated: bool = Field(..., description="Whether the content endpoint accepts this session")


class CollectionResponse(BaseModel):
    """A collection, from schema metadata or from the content endpoint.

    Extra keys returned by the endpoint pass through unchanged.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    label: str | None = None
    format: str | None = None
    path: str | None = None
    templates: Any = None
    fields: list[dict[str, Any]] | None = None
    documents: dict[str, Any] | None = Field(
        default=None, description="Present only when include_documents=true"
    )


class DocumentCreateRequest(BaseModel):
    """Request body for creating a document."""

    relative_path: str = Field(..., min_length=1, description="Path unique within the collection")
    params: dict[str, Any] = Field(default_factory=dict, description="Initial field values")


class DocumentUpdateRequest(BaseModel):
    """Request body for updating a document."""

    params: dict[str, Any] = Field(default_factory=dict, description="Field values to write")
