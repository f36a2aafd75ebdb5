"""Per-operation failure policy for the admin facade.

Local metadata reads recover with a default (metadata is reconstructable
and its absence must not break navigation). Every operation that touches
the content endpoint propagates, so callers can tell "content did not
change" from "content changed differently than requested".
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class FailureMode(str, Enum):
    """What the facade does when a collaborator call fails."""

    PROPAGATE = "propagate"
    RECOVER = "recover"


@dataclass(frozen=True)
class OperationPolicy:
    """Failure handling for one facade operation.

    default_factory builds the substitute result when mode is RECOVER.
    """

    mode: FailureMode
    default_factory: Callable[[], Any] | None = None

    def __post_init__(self) -> None:
        if self.mode is FailureMode.RECOVER and self.default_factory is None:
            raise ValueError("RECOVER policy requires a default_factory")

    @property
    def recovers(self) -> bool:
        return self.mode is FailureMode.RECOVER

    def default(self) -> Any:
        """Return a fresh default result. Only valid for RECOVER policies."""
        if self.default_factory is None:
            raise ValueError("PROPAGATE policy has no default result")
        return self.default_factory()


PROPAGATE = OperationPolicy(FailureMode.PROPAGATE)

OPERATION_POLICIES: dict[str, OperationPolicy] = {
    "is_authenticated": PROPAGATE,
    "fetch_collections": OperationPolicy(FailureMode.RECOVER, list),
    "fetch_collection": OperationPolicy(FailureMode.RECOVER, lambda: None),
    "fetch_collection_with_documents": PROPAGATE,
    "fetch_document": PROPAGATE,
    "create_document": PROPAGATE,
    "update_document": PROPAGATE,
    "delete_document": PROPAGATE,
}


def get_policy(operation: str) -> OperationPolicy:
    """Return the policy for an operation.

    Raises:
        KeyError: Operation has no declared policy.
    """
    try:
        return OPERATION_POLICIES[operation]
    except KeyError:
        raise KeyError(f"No failure policy declared for operation: {operation!r}") from None
