"""Canonical orderings of product instances and flavors.

Instances sort by name, then id. Flavors sort by price, then name, then
owning instance id. Both are total orders over the identity keys, so
sorting the same collection always gives the same sequence.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from .models import ProductFlavor, ProductInstance


def product_instance_sort_key(instance: ProductInstance) -> tuple[str, str]:
    return (instance.name, instance.id)


def product_flavor_sort_key(flavor: ProductFlavor) -> tuple[float, str, str]:
    return (flavor.price, flavor.name, flavor.instance_id)


def _compare(a: tuple, b: tuple) -> int:
    return (a > b) - (a < b)


def product_instance_comparator(a: ProductInstance, b: ProductInstance) -> int:
    """Return -1, 0 or 1 comparing two instances."""
    return _compare(product_instance_sort_key(a), product_instance_sort_key(b))


def product_flavor_comparator(a: ProductFlavor, b: ProductFlavor) -> int:
    """Return -1, 0 or 1 comparing two flavors."""
    return _compare(product_flavor_sort_key(a), product_flavor_sort_key(b))


def sort_product_instances(instances: Iterable[ProductInstance]) -> list[ProductInstance]:
    return sorted(instances, key=cmp_to_key(product_instance_comparator))


def sort_product_flavors(flavors: Iterable[ProductFlavor]) -> list[ProductFlavor]:
    return sorted(flavors, key=cmp_to_key(product_flavor_comparator))
