"""Admin facade: collections and documents for the editorial admin surface.

Decides per operation whether to answer from local schema metadata or to
issue one operation against the content endpoint, and applies the
operation's failure policy (see failure_policy.OPERATION_POLICIES).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from content_admin.application import operations
from content_admin.application.failure_policy import get_policy
from content_admin.application.interfaces import IMetadataProvider, IRemoteExecutor
from content_admin.domain.entities import Collection

logger = logging.getLogger(__name__)


class AdminFacade:
    """Single entry point for the admin host (collections + document CRUD).

    Stateless apart from the two injected capabilities and the data-layer
    flag captured at construction. No locking, batching or caching: every
    read returns a fresh snapshot and every write is one remote instruction.
    """

    def __init__(
        self,
        metadata_provider: IMetadataProvider,
        remote_executor: IRemoteExecutor,
        *,
        use_data_layer: bool = False,
    ) -> None:
        self.metadata_provider = metadata_provider
        self.remote_executor = remote_executor
        self.use_data_layer = use_data_layer

    def _call_local(self, operation: str, func: Callable[..., Any], *args: Any) -> Any:
        """Run a metadata provider call under the operation's failure policy."""
        policy = get_policy(operation)
        try:
            return func(*args)
        except Exception as e:
            if not policy.recovers:
                raise
            logger.error("[AdminFacade] Unable to %s(): %s", operation, e)
            return policy.default()

    async def _await_remote(
        self, operation: str, func: Callable[..., Awaitable[Any]], *args: Any
    ) -> Any:
        """Await a remote executor call under the operation's failure policy."""
        policy = get_policy(operation)
        try:
            return await func(*args)
        except Exception as e:
            if not policy.recovers:
                raise
            logger.error("[AdminFacade] Unable to %s(): %s", operation, e)
            return policy.default()

    async def _call_remote(
        self, operation: str, document: str, variables: dict[str, Any]
    ) -> dict[str, Any]:
        """Execute one remote operation document under the operation's failure policy."""
        return await self._await_remote(
            operation, self.remote_executor.execute, document, variables
        )

    async def is_authenticated(self) -> bool:
        """Return the remote executor's authentication check verbatim."""
        return await self._await_remote(
            "is_authenticated", self.remote_executor.is_authenticated
        )

    async def fetch_collections(self) -> list[Collection]:
        """Return all collections from local metadata, or [] when schema state is unavailable.

        An empty list means "no collections or schema unavailable"; the
        failure is logged, never raised.
        """
        return self._call_local(
            "fetch_collections", self.metadata_provider.get_collections
        )

    async def fetch_collection(
        self, collection_name: str, include_documents: bool = False
    ) -> Collection | dict[str, Any] | None:
        """Return one collection, optionally with its documents.

        Without documents the answer comes from local metadata; a failure is
        logged and None (not found) is returned. With documents, one remote
        query returns the server's collection verbatim, documents included
        in server order; any failure propagates.
        """
        if not include_documents:
            return self._call_local(
                "fetch_collection", self.metadata_provider.get_collection, collection_name
            )

        sort = self.metadata_provider.get_sort_field_name(collection_name)
        variables: dict[str, Any] = {
            "collection": collection_name,
            "includeDocuments": True,
        }
        if sort is not None:
            variables["sort"] = sort
        response = await self._call_remote(
            "fetch_collection_with_documents",
            operations.GET_COLLECTION_WITH_DOCUMENTS,
            variables,
        )
        return response["collection"]

    async def fetch_document(
        self, collection_name: str, relative_path: str
    ) -> dict[str, Any]:
        """Return the raw response wrapper holding the document's ``_values``."""
        return await self._call_remote(
            "fetch_document",
            operations.GET_DOCUMENT_VALUES,
            {"collection": collection_name, "relativePath": relative_path},
        )

    async def create_document(
        self, collection_name: str, relative_path: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        """Create a document at relative_path with initial field values; return the raw response."""
        return await self._call_remote(
            "create_document",
            operations.CREATE_DOCUMENT,
            {
                "collection": collection_name,
                "relativePath": relative_path,
                "params": params,
            },
        )

    async def update_document(
        self, collection_name: str, relative_path: str, params: dict[str, Any]
    ) -> dict[str, Any]:
        """Update an existing document's fields; return the raw response."""
        return await self._call_remote(
            "update_document",
            operations.UPDATE_DOCUMENT,
            {
                "collection": collection_name,
                "relativePath": relative_path,
                "params": params,
            },
        )

    async def delete_document(self, *, collection: str, relative_path: str) -> None:
        """Delete a document. The response is discarded; failure propagates."""
        await self._call_remote(
            "delete_document",
            operations.DELETE_DOCUMENT,
            {"collection": collection, "relativePath": relative_path},
        )
