"""Product Instance Module - catalog model, orderings and acquisition."""

from .comparators import (
    product_flavor_comparator,
    product_flavor_sort_key,
    product_instance_comparator,
    product_instance_sort_key,
    sort_product_flavors,
    sort_product_instances,
)
from .errors import CatalogError, FetchFailure, ImagePreloadFailure
from .models import (
    LEGACY_PRICE_RATE,
    ProductFlavor,
    ProductInstance,
    product_flavor_item_id,
    product_instance_item_id,
)
from .preloader import HttpImagePreloader, ImagePreloader, NoopImagePreloader
from .service import CatalogService

__all__ = [
    "CatalogError",
    "CatalogService",
    "FetchFailure",
    "HttpImagePreloader",
    "ImagePreloadFailure",
    "ImagePreloader",
    "LEGACY_PRICE_RATE",
    "NoopImagePreloader",
    "ProductFlavor",
    "ProductInstance",
    "product_flavor_comparator",
    "product_flavor_item_id",
    "product_flavor_sort_key",
    "product_instance_comparator",
    "product_instance_item_id",
    "product_instance_sort_key",
    "sort_product_flavors",
    "sort_product_instances",
]
