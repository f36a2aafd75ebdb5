"""Admin API: thin routes delegating to AdminFacade (collections and document CRUD)."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from content_admin.api.v1.dependencies import get_admin_facade
from content_admin.application.use_cases import AdminFacade
from content_admin.domain.entities import Collection
from content_admin.domain.exceptions import ResourceNotFoundException
from content_admin.schemas.admin import (
    AuthStatusResponse,
    CollectionResponse,
    DocumentCreateRequest,
    DocumentUpdateRequest,
)

router = APIRouter()

FacadeDep = Annotated[AdminFacade, Depends(get_admin_facade)]


@router.get("/auth", response_model=AuthStatusResponse)
async def auth_status(facade: FacadeDep) -> AuthStatusResponse:
    """Return whether the content endpoint accepts the current session."""
    return AuthStatusResponse(authenticated=await facade.is_authenticated())


@router.get(
    "/collections",
    response_model=list[CollectionResponse],
    response_model_exclude_none=True,
)
async def list_collections(facade: FacadeDep) -> list[dict[str, Any]]:
    """List collections from schema metadata (empty when schema is unavailable)."""
    return [c.to_dict() for c in await facade.fetch_collections()]


@router.get(
    "/collections/{collection_name}",
    response_model=CollectionResponse,
    response_model_exclude_none=True,
)
async def get_collection(
    collection_name: str,
    facade: FacadeDep,
    include_documents: bool = Query(False, description="Include the documents list from the content endpoint"),
) -> dict[str, Any] | JSONResponse:
    """Get one collection, optionally with its documents.

    With documents, the endpoint's collection is returned as-is (null keys
    included); only schema-backed bodies drop unset attributes.
    """
    collection = await facade.fetch_collection(collection_name, include_documents)
    if collection is None:
        raise ResourceNotFoundException("collection", collection_name)
    if not isinstance(collection, Collection):
        return JSONResponse(content=collection)
    return collection.to_dict()


@router.get("/collections/{collection_name}/documents/{relative_path:path}")
async def get_document(
    collection_name: str, relative_path: str, facade: FacadeDep
) -> dict[str, Any]:
    """Get a document's values (raw response wrapper)."""
    return await facade.fetch_document(collection_name, relative_path)


@router.post("/collections/{collection_name}/documents", status_code=201)
async def create_document(
    collection_name: str, body: DocumentCreateRequest, facade: FacadeDep
) -> dict[str, Any]:
    """Create a document in the collection."""
    return await facade.create_document(collection_name, body.relative_path, body.params)


@router.put("/collections/{collection_name}/documents/{relative_path:path}")
async def update_document(
    collection_name: str,
    relative_path: str,
    body: DocumentUpdateRequest,
    facade: FacadeDep,
) -> dict[str, Any]:
    """Update an existing document."""
    return await facade.update_document(collection_name, relative_path, body.params)


@router.delete(
    "/collections/{collection_name}/documents/{relative_path:path}",
    status_code=204,
)
async def delete_document(
    collection_name: str, relative_path: str, facade: FacadeDep
) -> Response:
    """Delete a document."""
    await facade.delete_document(collection=collection_name, relative_path=relative_path)
    return Response(status_code=204)
