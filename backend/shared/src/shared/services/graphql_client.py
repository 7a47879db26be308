"""HTTP transport for the TinyHouse GraphQL API.

Every failure mode (network error, non-2xx status, undecodable body, a
GraphQL ``errors`` payload) surfaces as ``RemoteDataError`` so callers only
ever catch one exception type.
"""

import logging
from typing import Any

import httpx

from shared.config import get_settings

logger = logging.getLogger(__name__)

CSRF_TOKEN_HEADER = "X-CSRF-TOKEN"


class RemoteDataError(Exception):
    """Raised when a GraphQL request fails."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


class GraphQLClient:
    """Executes GraphQL documents over HTTP POST.

    Usage:
        client = GraphQLClient()
        data = client.execute(USER, {"id": "5d378db94e84753160e08b55", "limit": 4})
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: GraphQL endpoint. Defaults to TINYHOUSE_API_URL.
            http_client: Preconfigured httpx client (tests pass a MockTransport).
            timeout: Request timeout in seconds. Defaults to the configured timeout.
        """
        settings = get_settings()
        self._url = url or settings.api_url
        self._http = http_client or httpx.Client(
            timeout=timeout if timeout is not None else settings.request_timeout
        )
        self._token: str | None = None

    def set_token(self, token: str | None) -> None:
        """Set the CSRF token sent with every request (None to clear)."""
        self._token = token

    def execute(
        self, document: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Execute a query or mutation and return its ``data`` object.

        Raises:
            RemoteDataError: On any transport or GraphQL failure.
        """
        headers = {CSRF_TOKEN_HEADER: self._token} if self._token else {}

        try:
            response = self._http.post(
                self._url,
                json={"query": document, "variables": variables or {}},
                headers=headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteDataError(f"Request to {self._url} failed: {e}") from e

        if response.is_error:
            raise RemoteDataError(
                f"GraphQL endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteDataError(
                "GraphQL endpoint returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, dict):
            raise RemoteDataError(
                "GraphQL endpoint returned an unexpected body",
                status_code=response.status_code,
            )

        errors = payload.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            first = errors[0]
            message = (
                first.get("message", "Unknown GraphQL error")
                if isinstance(first, dict)
                else str(first)
            )
            raise RemoteDataError(
                message,
                status_code=response.status_code,
                errors=[e if isinstance(e, dict) else {"message": str(e)} for e in errors],
            )

        data = payload.get("data")
        return data if isinstance(data, dict) else {}

    def close(self) -> None:
        self._http.close()
