"""Application layer: interfaces, failure policy, operation documents, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (schema provider, GraphQL client).
"""

from content_admin.application.failure_policy import (
    OPERATION_POLICIES,
    FailureMode,
    OperationPolicy,
    get_policy,
)
from content_admin.application.interfaces import IMetadataProvider, IRemoteExecutor
from content_admin.application.use_cases import AdminFacade

__all__ = [
    "AdminFacade",
    "FailureMode",
    "IMetadataProvider",
    "IRemoteExecutor",
    "OPERATION_POLICIES",
    "OperationPolicy",
    "get_policy",
]
