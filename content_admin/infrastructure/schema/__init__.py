"""Local schema introspection (metadata provider)."""

from content_admin.infrastructure.schema.provider import SchemaMetadataProvider

__all__ = ["SchemaMetadataProvider"]
