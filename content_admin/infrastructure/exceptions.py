"""Infrastructure exceptions for the remote content endpoint.

Transport errors extend ContentAdminException so presentation can map
them to HTTP responses consistently.
"""

from typing import Any

from content_admin.domain.exceptions import ContentAdminException


class TransportException(ContentAdminException):
    """Network, protocol, or HTTP-status failure talking to a remote endpoint."""

    def __init__(
        self,
        url: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        details: dict[str, Any] = {"url": url, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Request to {url} failed: {reason}",
            "TRANSPORT_ERROR",
            details,
        )
        self.status_code = status_code


class RemoteOperationException(TransportException):
    """The endpoint answered but rejected the operation (GraphQL ``errors``)."""

    def __init__(self, url: str, errors: list[dict[str, Any]]) -> None:
        messages = [str(e.get("message", e)) for e in errors]
        ContentAdminException.__init__(
            self,
            "; ".join(messages) or "Remote operation failed",
            "REMOTE_OPERATION_ERROR",
            {"url": url, "errors": errors},
        )
        self.status_code = None
        self.errors = errors
