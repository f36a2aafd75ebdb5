"""Admin facade factory: builds the facade and its collaborators from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from content_admin.application.use_cases import AdminFacade
from content_admin.infrastructure.graphql import ContentGraphQLClient
from content_admin.infrastructure.schema import SchemaMetadataProvider

if TYPE_CHECKING:
    from content_admin.application.interfaces import IMetadataProvider, IRemoteExecutor
    from content_admin.core.config import Settings


class AdminFacadeFactory:
    """Factory for the admin facade and its default collaborators."""

    @staticmethod
    def create_remote_executor(settings: "Settings | None" = None) -> ContentGraphQLClient:
        """Create the GraphQL client for CONTENT_API_URL.

        The caller owns the client and must await aclose() on shutdown.
        """
        from content_admin.core.config import get_settings

        s = settings or get_settings()
        return ContentGraphQLClient(
            s.content_api_url,
            token=s.content_api_token,
            identity_url=s.identity_api_url,
            timeout=s.request_timeout_seconds,
        )

    @staticmethod
    def create_metadata_provider(settings: "Settings | None" = None) -> SchemaMetadataProvider:
        """Create the schema provider for CONTENT_SCHEMA_PATH (read lazily)."""
        from content_admin.core.config import get_settings

        s = settings or get_settings()
        if not s.content_schema_path:
            raise ValueError("CONTENT_SCHEMA_PATH required for schema metadata")
        return SchemaMetadataProvider.from_file(s.content_schema_path)

    @staticmethod
    def create_admin_facade(
        settings: "Settings | None" = None,
        *,
        metadata_provider: "IMetadataProvider | None" = None,
        remote_executor: "IRemoteExecutor | None" = None,
    ) -> AdminFacade:
        """Create the facade; collaborators not given are built from settings.

        Args:
            settings: Application settings; if None, uses get_settings().
            metadata_provider: Optional provider (default: SchemaMetadataProvider).
            remote_executor: Optional executor (default: ContentGraphQLClient).

        Returns:
            AdminFacade with use_data_layer taken from DATA_LAYER_ENABLED.
        """
        from content_admin.core.config import get_settings

        s = settings or get_settings()
        return AdminFacade(
            metadata_provider or AdminFacadeFactory.create_metadata_provider(s),
            remote_executor or AdminFacadeFactory.create_remote_executor(s),
            use_data_layer=s.data_layer_enabled,
        )
