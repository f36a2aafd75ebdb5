"""Schema metadata provider backed by a JSON schema description.

The description lists collections::

    {"collections": [
        {"name": "post", "label": "Posts", "path": "content/posts", "format": "md",
         "fields": [{"type": "string", "name": "title", "isTitle": true}]},
        {"name": "page", "label": "Pages", "path": "content/pages", "format": "mdx",
         "templates": [{"name": "landing", "fields": [...]}]}
    ]}

When built from a file the schema is read lazily on first use; a failed
read is not cached, so the next call tries again.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from content_admin.domain.entities import Collection
from content_admin.domain.exceptions import (
    CollectionNotFoundException,
    MetadataUnavailableException,
)

logger = logging.getLogger(__name__)


class SchemaMetadataProvider:
    """IMetadataProvider over a schema mapping or a schema JSON file."""

    def __init__(
        self,
        schema: dict[str, Any] | None = None,
        *,
        schema_path: str | Path | None = None,
    ) -> None:
        if schema is None and schema_path is None:
            raise ValueError("Either schema or schema_path is required")
        self._schema = schema
        self._schema_path = Path(schema_path) if schema_path is not None else None

    @classmethod
    def from_file(cls, path: str | Path) -> "SchemaMetadataProvider":
        return cls(schema_path=path)

    def _load(self) -> dict[str, Any]:
        if self._schema is not None:
            return self._schema
        path = self._schema_path
        if not path.is_file():
            raise MetadataUnavailableException(
                f"schema file not found: {path}", {"path": str(path)}
            )
        try:
            with open(path, encoding="utf-8") as f:
                schema = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise MetadataUnavailableException(
                f"schema file could not be read: {e}", {"path": str(path)}
            ) from e
        self._schema = schema
        logger.info("Loaded content schema from %s", path)
        return schema

    def _raw_collections(self) -> list[dict[str, Any]]:
        schema = self._load()
        collections = schema.get("collections") if isinstance(schema, dict) else None
        if not isinstance(collections, list):
            raise MetadataUnavailableException("schema has no 'collections' list")
        return collections

    def get_collections(self) -> list[Collection]:
        """Return every declared collection, in declaration order."""
        return [Collection.from_schema(raw) for raw in self._raw_collections()]

    def get_collection(self, name: str) -> Collection:
        """Return the named collection.

        Raises:
            CollectionNotFoundException: No collection with that name.
            MetadataUnavailableException: Schema cannot be loaded.
        """
        for raw in self._raw_collections():
            if raw.get("name") == name:
                return Collection.from_schema(raw)
        raise CollectionNotFoundException(name)

    def get_sort_field_name(self, name: str) -> str | None:
        """Return the collection's ``isTitle`` field name, or None when none is declared."""
        return self.get_collection(name).title_field_name()
