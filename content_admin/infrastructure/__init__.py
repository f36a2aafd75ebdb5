"""Infrastructure: schema metadata provider, GraphQL client, facade factory.

Implements the application interfaces (IMetadataProvider, IRemoteExecutor).
"""

from content_admin.infrastructure.exceptions import (
    RemoteOperationException,
    TransportException,
)
from content_admin.infrastructure.factory import AdminFacadeFactory
from content_admin.infrastructure.graphql import ContentGraphQLClient
from content_admin.infrastructure.schema import SchemaMetadataProvider

__all__ = [
    "AdminFacadeFactory",
    "ContentGraphQLClient",
    "RemoteOperationException",
    "SchemaMetadataProvider",
    "TransportException",
]
