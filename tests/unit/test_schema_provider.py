"""Unit tests for SchemaMetadataProvider (schema mapping and lazy file loading)."""

import json

import pytest

from content_admin.domain.exceptions import (
    CollectionNotFoundException,
    MetadataUnavailableException,
)
from content_admin.infrastructure.schema import SchemaMetadataProvider
from tests.conftest import SCHEMA


class TestGetCollections:
    """Tests for get_collections."""

    def test_declaration_order(self, schema_provider) -> None:
        assert [c.name for c in schema_provider.get_collections()] == ["posts", "pages"]

    def test_static_attributes(self, schema_provider) -> None:
        posts = schema_provider.get_collections()[0]
        assert posts.label == "Blog Posts"
        assert posts.format == "md"
        assert posts.path == "content/posts"
        assert posts.templates == []
        assert [f["name"] for f in posts.fields] == ["title", "body"]
        assert posts.documents is None

    def test_fresh_values_per_call(self, schema_provider) -> None:
        first = schema_provider.get_collections()
        first[0].label = "changed"
        assert schema_provider.get_collections()[0].label == "Blog Posts"

    def test_missing_collections_key_raises(self) -> None:
        with pytest.raises(MetadataUnavailableException, match="collections"):
            SchemaMetadataProvider({"types": []}).get_collections()


class TestGetCollection:
    """Tests for get_collection."""

    def test_templates_collection(self, schema_provider) -> None:
        pages = schema_provider.get_collection("pages")
        assert pages.format == "mdx"
        assert [t["name"] for t in pages.templates] == ["landing", "content"]
        assert pages.fields == []

    def test_unknown_raises_not_found(self, schema_provider) -> None:
        with pytest.raises(CollectionNotFoundException) as exc_info:
            schema_provider.get_collection("authors")
        assert exc_info.value.error_code == "COLLECTION_NOT_FOUND"
        assert exc_info.value.details == {"collection": "authors"}

    def test_not_found_is_metadata_unavailable(self, schema_provider) -> None:
        with pytest.raises(MetadataUnavailableException):
            schema_provider.get_collection("authors")


class TestGetSortFieldName:
    """Tests for get_sort_field_name."""

    def test_title_field(self, schema_provider) -> None:
        assert schema_provider.get_sort_field_name("posts") == "title"

    def test_templates_collection_has_none(self, schema_provider) -> None:
        assert schema_provider.get_sort_field_name("pages") is None

    def test_no_title_field_has_none(self) -> None:
        provider = SchemaMetadataProvider(
            {"collections": [{"name": "tags", "fields": [{"name": "label"}]}]}
        )
        assert provider.get_sort_field_name("tags") is None

    def test_first_title_field_wins(self) -> None:
        provider = SchemaMetadataProvider(
            {
                "collections": [
                    {
                        "name": "authors",
                        "fields": [
                            {"name": "bio"},
                            {"name": "name", "isTitle": True},
                            {"name": "handle", "isTitle": True},
                        ],
                    }
                ]
            }
        )
        assert provider.get_sort_field_name("authors") == "name"


class TestSchemaFile:
    """Tests for lazy loading from a JSON file."""

    def test_loads_file(self, tmp_path) -> None:
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(SCHEMA), encoding="utf-8")

        provider = SchemaMetadataProvider.from_file(path)

        assert [c.name for c in provider.get_collections()] == ["posts", "pages"]

    def test_missing_file_raises(self, tmp_path) -> None:
        provider = SchemaMetadataProvider.from_file(tmp_path / "nope.json")
        with pytest.raises(MetadataUnavailableException, match="not found"):
            provider.get_collections()

    def test_invalid_json_raises(self, tmp_path) -> None:
        path = tmp_path / "schema.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(MetadataUnavailableException, match="could not be read"):
            SchemaMetadataProvider.from_file(path).get_collections()

    def test_failed_load_is_retried(self, tmp_path) -> None:
        path = tmp_path / "schema.json"
        provider = SchemaMetadataProvider.from_file(path)
        with pytest.raises(MetadataUnavailableException):
            provider.get_collections()

        path.write_text(json.dumps(SCHEMA), encoding="utf-8")

        assert len(provider.get_collections()) == 2

    def test_requires_schema_or_path(self) -> None:
        with pytest.raises(ValueError, match="schema_path"):
            SchemaMetadataProvider()
