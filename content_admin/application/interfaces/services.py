"""Capability interfaces (ports) consumed by the admin facade.

Protocols define the contracts for the two collaborators (DIP): local
schema metadata and the remote content endpoint. Infrastructure provides
the implementations; tests substitute fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from content_admin.domain.entities import Collection


# Metadata provider interface
class IMetadataProvider(Protocol):
    """Protocol for synchronous, local schema introspection (authoritative about collection shape)."""

    def get_collections(self) -> list[Collection]:
        """Return every declared collection, in declaration order. Raises when schema state is unavailable."""

    def get_collection(self, name: str) -> Collection:
        """Return the named collection. Raises when unknown or when schema state is unavailable."""

    def get_sort_field_name(self, name: str) -> str | None:
        """Return the collection's designated title field name, or None when none is declared."""


# Remote executor interface
class IRemoteExecutor(Protocol):
    """Protocol for the remote content endpoint (authoritative about stored documents)."""

    async def is_authenticated(self) -> bool:
        """Return whether the current session may talk to the content endpoint."""

    async def execute(
        self, document: str, variables: dict[str, Any]
    ) -> dict[str, Any]:
        """Execute one named operation document with variables; return the response data.

        Raises on network, protocol, or server-side validation failure.
        """
