"""Image preloading backends.

Preloading only warms a cache: the response body is discarded, and a
preload either succeeds or raises ``ImagePreloadFailure``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from ..common.http_client import HTTPClient
from .errors import ImagePreloadFailure

logger = logging.getLogger(__name__)


class ImagePreloader(ABC):
    """Capability to load an image ahead of display."""

    @abstractmethod
    async def preload(self, url: str) -> None:
        """Load the image at ``url``. Raise ImagePreloadFailure on failure."""
        ...


class NoopImagePreloader(ImagePreloader):
    """Preloader for targets with no image cache to warm."""

    async def preload(self, url: str) -> None:
        return None


class HttpImagePreloader(ImagePreloader):
    """Preloads an image with a plain HTTP GET."""

    def __init__(self, client: HTTPClient) -> None:
        self._client = client

    async def preload(self, url: str) -> None:
        try:
            response = await self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise ImagePreloadFailure(
                f"Could not preload image {url}: {exc}",
                url=url,
                cause=exc,
            ) from exc

        if not response.is_success:
            raise ImagePreloadFailure(
                f"Could not preload image {url}: server responded with "
                f"error {response.status_code}",
                url=url,
                status=response.status_code,
            )
        logger.debug("Preloaded %s", url)
