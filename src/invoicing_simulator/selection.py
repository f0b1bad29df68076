"""Selection state machine: the active instance and the selected flavors."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..product_instance.comparators import sort_product_flavors
from ..product_instance.models import ProductFlavor, ProductInstance

logger = logging.getLogger(__name__)


@dataclass
class SelectionState:
    """Holds at most one active instance and a set of selected flavors.

    The selected flavors are kept deduplicated by identity and sorted
    with ``product_flavor_comparator`` after every change. Switching the
    active instance keeps flavors selected from the previous one.
    """

    selected_product_instance: ProductInstance | None = None
    _selected_flavors: tuple[ProductFlavor, ...] = field(default=(), init=False)

    @property
    def has_instance(self) -> bool:
        return self.selected_product_instance is not None

    @property
    def selected_flavors(self) -> tuple[ProductFlavor, ...]:
        return self._selected_flavors

    def is_flavor_selected(self, flavor: ProductFlavor) -> bool:
        return flavor in self._selected_flavors

    def select_instance(self, instance: ProductInstance) -> None:
        """Make ``instance`` the active one. Selected flavors are kept."""
        logger.debug("Selected product instance %s", instance.id)
        self.selected_product_instance = instance

    def add_flavor(self, flavor: ProductFlavor) -> bool:
        """Add ``flavor`` to the selection.

        Ignored when no instance is active or the flavor is already
        selected. Returns whether the selection changed.
        """
        if self.selected_product_instance is None:
            logger.debug("Ignoring flavor %s: no active instance", flavor.key)
            return False
        if flavor in self._selected_flavors:
            return False

        self._selected_flavors = tuple(
            sort_product_flavors([*self._selected_flavors, flavor])
        )
        logger.debug("Added flavor %s", flavor.key)
        return True

    def remove_flavor(self, flavor: ProductFlavor) -> bool:
        """Remove ``flavor`` by identity. Returns whether it was selected."""
        remaining = tuple(f for f in self._selected_flavors if f != flavor)
        if len(remaining) == len(self._selected_flavors):
            return False

        self._selected_flavors = remaining
        logger.debug("Removed flavor %s", flavor.key)
        return True
