"""Domain layer: entities and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from content_admin.domain.entities import Collection
from content_admin.domain.exceptions import (
    CollectionNotFoundException,
    ContentAdminException,
    MetadataUnavailableException,
    ResourceNotFoundException,
)

__all__ = [
    "Collection",
    "CollectionNotFoundException",
    "ContentAdminException",
    "MetadataUnavailableException",
    "ResourceNotFoundException",
]
