"""Errors raised while acquiring the product catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base error for catalog acquisition.

    Carries the requested ``url``, the HTTP ``status`` when a response was
    received, and the underlying ``cause`` when one was raised.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
        self.cause = cause


class FetchFailure(CatalogError):
    """The catalog could not be fetched. Retrying later is reasonable."""


class ImagePreloadFailure(CatalogError):
    """A product logo could not be preloaded."""
