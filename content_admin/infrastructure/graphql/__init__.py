"""GraphQL remote executor for the content endpoint."""

from content_admin.infrastructure.graphql.client import ContentGraphQLClient

__all__ = ["ContentGraphQLClient"]
