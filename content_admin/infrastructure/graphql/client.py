"""Thin GraphQL client for the content endpoint.

All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Implements IRemoteExecutor: execute(document, variables) and
is_authenticated().
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import SecretStr

from content_admin.infrastructure.exceptions import (
    RemoteOperationException,
    TransportException,
)

logger = logging.getLogger(__name__)


class ContentGraphQLClient:
    """Remote executor posting operation documents to a GraphQL endpoint."""

    def __init__(
        self,
        endpoint: str,
        *,
        token: SecretStr | str | None = None,
        identity_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._endpoint = endpoint
        self._token = token.get_secret_value() if isinstance(token, SecretStr) else token
        self._identity_url = identity_url
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def execute(
        self, document: str, variables: dict[str, Any]
    ) -> dict[str, Any]:
        """POST the operation and return its ``data``.

        Raises:
            TransportException: Network error, non-2xx status, or non-JSON body.
            RemoteOperationException: Response carries GraphQL ``errors``.
        """
        try:
            resp = await self._http.post(
                self._endpoint,
                headers=self._headers(),
                json={"query": document, "variables": variables},
            )
        except httpx.HTTPError as e:
            raise TransportException(self._endpoint, str(e) or type(e).__name__) from e

        if not resp.is_success:
            raise TransportException(
                self._endpoint,
                f"HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        try:
            body = json.loads(resp.content.decode()) if resp.content else {}
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TransportException(self._endpoint, "Response is not valid JSON") from e
        if not isinstance(body, dict):
            raise TransportException(self._endpoint, "Response is not a JSON object")

        errors = body.get("errors")
        if errors:
            logger.debug("GraphQL errors from %s: %s", self._endpoint, errors)
            raise RemoteOperationException(self._endpoint, errors)
        return body.get("data") or {}

    async def is_authenticated(self) -> bool:
        """Return whether the configured token is accepted by the identity endpoint.

        Without an identity endpoint (local content server) every session is
        authenticated. With one, a missing token is unauthenticated; 200 is
        authenticated, 401/403 is not, anything else raises.

        Raises:
            TransportException: Network error or unexpected status.
        """
        if not self._identity_url:
            return True
        if not self._token:
            return False
        try:
            resp = await self._http.get(self._identity_url, headers=self._headers())
        except httpx.HTTPError as e:
            raise TransportException(self._identity_url, str(e) or type(e).__name__) from e
        if resp.status_code == 200:
            return True
        if resp.status_code in (401, 403):
            return False
        raise TransportException(
            self._identity_url,
            f"HTTP {resp.status_code}",
            status_code=resp.status_code,
        )
