"""Product instance catalog service.

Fetches the product catalog from the Clever Cloud API, converts it into
``ProductInstance`` models and optionally preloads the product logos.

Usage:
    async with CatalogService() as service:
        instances = await service.get_product_instances(preload_logos=True)
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..common.config import Config
from ..common.http_client import HTTPClient
from .errors import FetchFailure
from .models import ProductInstance, RawProductInstance, convert_product_instance
from .preloader import HttpImagePreloader, ImagePreloader

logger = logging.getLogger(__name__)

FETCH_ERROR_PREFIX = "We could not fetch product instances."
RETRY_SUFFIX = "Please retry later."


class CatalogService:
    """Fetches product instances and converts them into view models.

    Args:
        config: Configuration (catalog URL, timeout, headers).
        client: HTTP client; one is created from ``config`` when omitted.
        preloader: Logo preloader; defaults to an HTTP GET preloader
                   sharing ``client``.
    """

    def __init__(
        self,
        config: Config | None = None,
        client: HTTPClient | None = None,
        preloader: ImagePreloader | None = None,
    ) -> None:
        self.config = config or Config()
        self._owns_client = client is None
        self._client = client or HTTPClient(self.config)
        self._preloader = preloader or HttpImagePreloader(self._client)

    async def get_product_instances(
        self,
        preload_logos: bool | None = None,
    ) -> list[ProductInstance]:
        """Fetch the catalog and convert it into ``ProductInstance`` models.

        Args:
            preload_logos: Whether to preload every instance logo before
                           returning. Defaults to ``config.preload_logos``.

        Returns:
            Product instances in the order served by the API.

        Raises:
            FetchFailure: Transport error, non-2xx status or unusable body.
            ImagePreloadFailure: Any one logo failed to preload.
        """
        if preload_logos is None:
            preload_logos = self.config.preload_logos

        raw_records = await self._fetch_product_instances()
        instances = self._convert_all(raw_records)
        logger.info(
            "Fetched %d product instances from %s",
            len(instances),
            self.config.catalog_url,
        )

        if preload_logos:
            await self._preload_logos(instances)

        return instances

    def get_product_instances_sync(
        self,
        preload_logos: bool | None = None,
    ) -> list[ProductInstance]:
        """Blocking variant of ``get_product_instances``."""

        async def _run() -> list[ProductInstance]:
            try:
                return await self.get_product_instances(preload_logos)
            finally:
                await self.aclose()

        return asyncio.run(_run())

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> CatalogService:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    # --- Internals ---

    async def _fetch_product_instances(self) -> list[Any]:
        """GET the catalog endpoint and decode its JSON array."""
        url = self.config.catalog_url
        try:
            response = await self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning("Catalog fetch failed: %s", exc)
            raise FetchFailure(
                f"{FETCH_ERROR_PREFIX} {exc} {RETRY_SUFFIX}",
                url=url,
                cause=exc,
            ) from exc

        if not response.is_success:
            logger.warning(
                "Catalog fetch failed: HTTP %d from %s", response.status_code, url
            )
            raise FetchFailure(
                f"{FETCH_ERROR_PREFIX} Server responded with error "
                f"{response.status_code}. {RETRY_SUFFIX}",
                url=url,
                status=response.status_code,
            )

        body = response.text
        if not body.strip():
            return []

        try:
            data = json.loads(body)
        except json.JSONDecodeError as exc:
            raise FetchFailure(
                f"{FETCH_ERROR_PREFIX} Server sent an invalid response. {RETRY_SUFFIX}",
                url=url,
                status=response.status_code,
                cause=exc,
            ) from exc

        if data is None:
            return []
        if not isinstance(data, list):
            raise FetchFailure(
                f"{FETCH_ERROR_PREFIX} Server sent an unexpected response. {RETRY_SUFFIX}",
                url=url,
                status=response.status_code,
            )
        return data

    def _convert_all(self, raw_records: list[Any]) -> list[ProductInstance]:
        """Convert raw records, skipping the malformed ones."""
        instances: list[ProductInstance] = []
        skipped = 0
        for index, raw in enumerate(raw_records):
            try:
                record = RawProductInstance.model_validate(raw)
                instances.append(convert_product_instance(record))
            except (ValidationError, ValueError) as exc:
                skipped += 1
                logger.warning("Skipping malformed product instance #%d: %s", index, exc)

        if skipped:
            logger.warning("Skipped %d malformed product instance(s)", skipped)
        return instances

    async def _preload_logos(self, instances: list[ProductInstance]) -> None:
        """Preload each distinct logo concurrently; the first failure wins.

        Instances sharing a logo URL trigger a single request, and instances
        without a logo are skipped rather than counted as failures.
        """
        urls = list(dict.fromkeys(i.logo for i in instances if i.logo))
        logger.debug("Preloading %d logos", len(urls))
        await asyncio.gather(*(self._preloader.preload(url) for url in urls))
