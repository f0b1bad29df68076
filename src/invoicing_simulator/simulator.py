"""Invoicing simulator.

Lets a user pick a product instance, add some of its flavors to a
selection and see the total price of that selection. The simulator only
derives data for a presentation layer: the ordered catalog, the flavors
still selectable, the selected flavors and the running total.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..product_instance.comparators import sort_product_flavors, sort_product_instances
from ..product_instance.models import (
    ProductFlavor,
    ProductInstance,
    product_flavor_item_id,
    product_instance_item_id,
)
from .selection import SelectionState

logger = logging.getLogger(__name__)


class InvoicingSimulator:
    """Composes a catalog with a ``SelectionState``.

    Usage:
        simulator = InvoicingSimulator(instances)
        simulator.on_select_product_instance(instances[0])
        simulator.on_select_product_flavor(simulator.selectable_flavors[0])
        print(simulator.format_total())
    """

    def __init__(
        self,
        product_instances: Iterable[ProductInstance],
        state: SelectionState | None = None,
    ) -> None:
        self._product_instances = tuple(product_instances)
        self.state = state or SelectionState()

    # --- Views ---

    @property
    def product_instances(self) -> list[ProductInstance]:
        """The catalog, ordered by name then id."""
        return sort_product_instances(self._product_instances)

    @property
    def selected_product_instance(self) -> ProductInstance | None:
        return self.state.selected_product_instance

    @property
    def selectable_flavors(self) -> list[ProductFlavor]:
        """Flavors of the active instance not selected yet."""
        instance = self.state.selected_product_instance
        if instance is None:
            return []
        selected = set(self.state.selected_flavors)
        return sort_product_flavors(f for f in instance.flavors if f not in selected)

    @property
    def selected_flavors(self) -> list[ProductFlavor]:
        return list(self.state.selected_flavors)

    @property
    def total_price(self) -> float:
        total = 0.0
        for flavor in self.state.selected_flavors:
            total += flavor.price
        return total

    def is_selected(self, instance: ProductInstance) -> bool:
        active = self.state.selected_product_instance
        return active is not None and active.id == instance.id

    def format_total(self, precision: int = 2, unit: str = "€") -> str:
        return f"Total: {self.total_price:.{precision}f} {unit}"

    def render_model(self) -> dict:
        """Plain-data snapshot of the four views, keyed by item ids."""
        return {
            "product_instances": [
                product_instance_item_id(i) for i in self.product_instances
            ],
            "selected_product_instance": (
                product_instance_item_id(self.selected_product_instance)
                if self.selected_product_instance is not None
                else None
            ),
            "selectable_flavors": [
                product_flavor_item_id(f) for f in self.selectable_flavors
            ],
            "selected_flavors": [
                product_flavor_item_id(f) for f in self.selected_flavors
            ],
            "total_price": self.total_price,
        }

    # --- User interactions ---

    def on_select_product_instance(self, instance: ProductInstance) -> None:
        self.state.select_instance(instance)

    def on_select_product_flavor(self, flavor: ProductFlavor) -> bool:
        """Add a flavor, provided it is offered by the active instance."""
        if flavor not in self.selectable_flavors:
            logger.debug("Flavor %s is not selectable, ignoring", flavor.key)
            return False
        return self.state.add_flavor(flavor)

    def on_unselect_product_flavor(self, flavor: ProductFlavor) -> bool:
        return self.state.remove_flavor(flavor)
