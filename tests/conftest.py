"""Pytest configuration and fixtures for content-admin.

HTTP tests run against content_admin.main:app over ASGI with the facade
dependency overridden, so no content endpoint or schema file is needed.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from content_admin.api.v1.dependencies import get_admin_facade
from content_admin.application.use_cases import AdminFacade
from content_admin.domain.entities import Collection
from content_admin.infrastructure.schema import SchemaMetadataProvider
from content_admin.main import app

SCHEMA = {
    "collections": [
        {
            "name": "posts",
            "label": "Blog Posts",
            "path": "content/posts",
            "format": "md",
            "fields": [
                {"type": "string", "name": "title", "isTitle": True, "required": True},
                {"type": "rich-text", "name": "body", "isBody": True},
            ],
        },
        {
            "name": "pages",
            "label": "Pages",
            "path": "content/pages",
            "format": "mdx",
            "templates": [
                {"name": "landing", "fields": [{"type": "string", "name": "heading"}]},
                {"name": "content", "fields": [{"type": "rich-text", "name": "body"}]},
            ],
        },
    ]
}


@pytest.fixture
def schema_provider() -> SchemaMetadataProvider:
    """Schema provider over the in-memory SCHEMA (posts + pages)."""
    return SchemaMetadataProvider(SCHEMA)


@pytest.fixture
def metadata_provider() -> MagicMock:
    """Metadata provider fake returning posts and pages; posts declares 'title'."""
    provider = MagicMock()
    provider.get_collections.return_value = [
        Collection(name="posts", label="Blog Posts", format="md"),
        Collection(name="pages", label="Pages", format="mdx"),
    ]
    provider.get_collection.side_effect = lambda name: Collection(name=name, format="md")
    provider.get_sort_field_name.return_value = "title"
    return provider


@pytest.fixture
def remote_executor() -> AsyncMock:
    """Remote executor fake; tests set execute.return_value / side_effect."""
    executor = AsyncMock()
    executor.is_authenticated = AsyncMock(return_value=True)
    executor.execute = AsyncMock(return_value={})
    return executor


@pytest.fixture
def facade(metadata_provider: MagicMock, remote_executor: AsyncMock) -> AdminFacade:
    return AdminFacade(metadata_provider, remote_executor)


@pytest.fixture
async def client(facade: AdminFacade) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with the facade overridden."""
    app.dependency_overrides[get_admin_facade] = lambda: facade
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_admin_facade, None)
