"""Domain exceptions for the content admin facade.

Defines domain-level exceptions independent of transport concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class ContentAdminException(Exception):
    """Base exception for all content admin errors.

    All custom exceptions inherit from this class so presentation can
    map them to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. collection, relative_path).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class MetadataUnavailableException(ContentAdminException):
    """Raised when local schema metadata cannot answer a query (missing or invalid)."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        """Initialize with the reason the schema could not be used.

        Args:
            reason: Description of the failure (e.g. file not found).
            details: Optional extra context.
        """
        super().__init__(
            f"Schema metadata unavailable: {reason}",
            "METADATA_UNAVAILABLE",
            details,
        )


class CollectionNotFoundException(MetadataUnavailableException):
    """Raised when the schema declares no collection with the requested name."""

    def __init__(self, collection_name: str) -> None:
        ContentAdminException.__init__(
            self,
            f"Collection not found: {collection_name}",
            "COLLECTION_NOT_FOUND",
            {"collection": collection_name},
        )


class ResourceNotFoundException(ContentAdminException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'collection').
            resource_id: The identifier that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )
