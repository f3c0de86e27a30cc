"""Request agent for the GDAX REST API.

The agent starts in public-only mode and can be upgraded with API keys to
reach private endpoints. Each private request is signed with a fresh
timestamp from the credentials held at the moment the call starts.

``upgrade()`` is a plain assignment without locking. A request already in
flight keeps the credentials it started with, but callers that need strict
ordering between an upgrade and concurrent requests must sequence them
themselves.
"""

import logging
from typing import Dict, Optional

import httpx

from .config import AgentConfig
from .query import build_path
from .signing import format_timestamp, serialize_body, sign_message
from .types import (
    ApiError,
    Body,
    Credentials,
    QueryParams,
    Signature,
    TransportError,
    Unauthenticated,
)

logger = logging.getLogger(__name__)


class RequestAgent:
    """Builds, signs and dispatches requests to the GDAX API.

    Usage:
        async with RequestAgent() as agent:
            response = await agent.get_public("products")

            agent.upgrade(Credentials("key", "c2VjcmV0", "passphrase"))
            response = await agent.get_private("accounts")
    """

    sign_message = staticmethod(sign_message)

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        config: Optional[AgentConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the agent.

        Args:
            credentials: API keys; omit for a public-only agent
            config: Connection settings (default: production API)
            transport: Custom httpx transport (optional)
        """
        self.config = config or AgentConfig()
        self._credentials = credentials

        self._client = httpx.AsyncClient(
            base_url=self.config.resolved_base_url(),
            headers=self.config.default_headers(),
            timeout=self.config.timeout,
            transport=transport,
        )

    # -------------------------------------------------------------------------
    # Credentials
    # -------------------------------------------------------------------------

    @property
    def credentials(self) -> Optional[Credentials]:
        return self._credentials

    def is_upgraded(self) -> bool:
        """Check whether API keys have been supplied."""
        return self._credentials is not None

    def upgrade(self, credentials: Credentials) -> None:
        """Replace the agent's credentials."""
        if not isinstance(credentials, Credentials):
            raise TypeError("upgrade() requires a Credentials instance")
        self._credentials = credentials

    # -------------------------------------------------------------------------
    # Request primitives
    # -------------------------------------------------------------------------

    async def get_public(
        self, endpoint: str, query_params: Optional[QueryParams] = None
    ) -> httpx.Response:
        """Fetch data from a public (unauthenticated) endpoint."""
        path = build_path(endpoint, query_params)
        return await self._send("GET", endpoint, path)

    async def get_private(
        self, endpoint: str, query_params: Optional[QueryParams] = None
    ) -> httpx.Response:
        """Fetch data from a private endpoint.

        Only the method and path (query string included) are signed.
        """
        credentials = self._require_credentials()
        path = build_path(endpoint, query_params)
        signature = sign_message(credentials.private_key, path, "GET")
        headers = self._auth_headers(credentials, signature)
        return await self._send("GET", endpoint, path, headers=headers)

    async def post_private(self, endpoint: str, body: Optional[Body] = None) -> httpx.Response:
        """Post a JSON body to a private endpoint.

        The body is part of the signed message and is sent exactly as signed.
        """
        credentials = self._require_credentials()
        path = build_path(endpoint)
        signature = sign_message(credentials.private_key, path, "POST", body)
        headers = self._auth_headers(credentials, signature)
        content = serialize_body(body).encode("utf-8") if body is not None else None
        return await self._send("POST", endpoint, path, headers=headers, content=content)

    async def delete_private(
        self, endpoint: str, query_params: Optional[QueryParams] = None
    ) -> httpx.Response:
        """Send a DELETE to a private endpoint."""
        credentials = self._require_credentials()
        path = build_path(endpoint, query_params)
        signature = sign_message(credentials.private_key, path, "DELETE")
        headers = self._auth_headers(credentials, signature)
        return await self._send("DELETE", endpoint, path, headers=headers)

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _require_credentials(self) -> Credentials:
        credentials = self._credentials
        if credentials is None:
            raise Unauthenticated()
        return credentials

    @staticmethod
    def _auth_headers(credentials: Credentials, signature: Signature) -> Dict[str, str]:
        return {
            "CB-ACCESS-KEY": credentials.public_key,
            "CB-ACCESS-PASSPHRASE": credentials.passphrase,
            "CB-ACCESS-SIGN": signature.digest,
            "CB-ACCESS-TIMESTAMP": format_timestamp(signature.timestamp),
        }

    async def _send(
        self,
        method: str,
        endpoint: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, headers=headers, content=content)
        except httpx.RequestError as exc:
            logger.debug("%s /%s failed: %s", method, endpoint, type(exc).__name__)
            raise TransportError(f"{method} /{endpoint} failed: {exc}") from exc

        logger.debug("%s /%s -> %s", method, endpoint, response.status_code)

        if not response.is_success:
            raise ApiError(response.status_code, _rejection_reason(response), response)

        return response

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def _rejection_reason(response: httpx.Response):
    """Pick the most specific rejection reason a failed response offers."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        for key in ("error", "message"):
            if data.get(key):
                return data[key]

    if data is not None:
        return data
    if response.text:
        return response.text
    return response
