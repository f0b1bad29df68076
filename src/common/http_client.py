"""Async HTTP client shared by the catalog service and image preloading."""

from __future__ import annotations

import logging

import httpx

from .config import Config

logger = logging.getLogger(__name__)


class HTTPClient:
    """Thin wrapper around ``httpx.AsyncClient``.

    Applies the configured default headers and timeout. It does not retry:
    a failed request surfaces to the caller as the raw httpx exception.
    """

    def __init__(
        self,
        config: Config | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or Config()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=self.config.default_headers,
            timeout=self.config.request_timeout,
            follow_redirects=True,
        )

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a single GET request.

        Args:
            url: Target URL.
            headers: Extra headers (merged with the client defaults).

        Returns:
            httpx.Response, whatever its status code.

        Raises:
            httpx.TransportError: DNS failure, timeout, connection reset...
        """
        logger.debug("GET %s", url)
        return await self._client.get(url, headers=headers)

    async def aclose(self) -> None:
        """Close the underlying client if this wrapper created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
