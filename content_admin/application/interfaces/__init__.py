"""Application interfaces (ports). Implementations live in infrastructure."""

from content_admin.application.interfaces.services import (
    IMetadataProvider,
    IRemoteExecutor,
)

__all__ = [
    "IMetadataProvider",
    "IRemoteExecutor",
]
