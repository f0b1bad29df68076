"""Data models for product instances and their flavors.

Two layers:
- ``Raw*`` pydantic models validate the wire records served by the
  catalog API.
- ``ProductInstance`` / ``ProductFlavor`` dataclasses are the read-only
  view models the rest of the application works with.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

# For legacy reasons the API price is multiplied by this rate (EUR).
LEGACY_PRICE_RATE = 41.904


# === Wire models ===

class RawVariant(BaseModel):
    """Identity block of a raw product instance."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    logo: str = ""


class RawMemory(BaseModel):
    """Memory block of a raw flavor."""
    model_config = ConfigDict(extra="ignore")

    formatted: str


class RawProductFlavor(BaseModel):
    """One flavor as served by the catalog API."""
    model_config = ConfigDict(extra="ignore")

    name: str
    price: float = Field(ge=0)
    mem: int = Field(ge=0, description="Memory in MiB")
    memory: RawMemory
    cpus: int = Field(ge=0)
    gpus: int = Field(default=0, ge=0)
    available: bool = True
    microservice: bool = False
    machine_learning: bool = False


class RawProductInstance(BaseModel):
    """One product instance as served by the catalog API."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    variant: RawVariant
    description: str = ""
    enabled: bool = True
    coming_soon: bool = Field(default=False, alias="comingSoon")
    flavors: list[RawProductFlavor] | None = None


# === View models ===

@dataclass(frozen=True, eq=False)
class ProductInstance:
    """A purchasable product line, owning its flavors.

    Read-only once converted. Equality and hashing follow ``id``.
    """

    id: str
    name: str
    description: str = ""
    logo: str = ""
    enabled: bool = True
    coming_soon: bool = False
    flavors: tuple[ProductFlavor, ...] = field(default=(), repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductInstance):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "logo": self.logo,
            "enabled": self.enabled,
            "coming_soon": self.coming_soon,
            "flavors": [f.to_dict() for f in self.flavors],
        }


@dataclass(frozen=True, eq=False)
class ProductFlavor:
    """One priced configuration of a product instance.

    Identity is ``(instance.id, name)``; the back-reference to the owning
    instance is left out of repr to avoid recursion.
    """

    instance: ProductInstance = field(repr=False)
    name: str
    price: float  # EUR, after LEGACY_PRICE_RATE conversion
    mem: int = 0  # MiB
    mem_formatted: str = ""
    cpus: int = 0
    gpus: int = 0
    available: bool = True
    microservice: bool = False
    machine_learning: bool = False

    @property
    def instance_id(self) -> str:
        return self.instance.id

    @property
    def key(self) -> tuple[str, str]:
        return (self.instance.id, self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductFlavor):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def to_dict(self) -> dict:
        return {
            "instance_id": self.instance_id,
            "name": self.name,
            "price": self.price,
            "mem": self.mem,
            "mem_formatted": self.mem_formatted,
            "cpus": self.cpus,
            "gpus": self.gpus,
            "available": self.available,
            "microservice": self.microservice,
            "machine_learning": self.machine_learning,
        }


def product_instance_item_id(instance: ProductInstance) -> str:
    """List item id of a catalog entry."""
    return instance.id


def product_flavor_item_id(flavor: ProductFlavor) -> str:
    """List item id of a flavor: ``<instance id>/<flavor name>``."""
    return f"{flavor.instance_id}/{flavor.name}"


def convert_product_instance(raw: RawProductInstance) -> ProductInstance:
    """Convert a validated wire record into a ``ProductInstance``.

    Every flavor price is multiplied by ``LEGACY_PRICE_RATE``.
    """
    instance = ProductInstance(
        id=raw.variant.id,
        name=raw.variant.name,
        description=raw.description,
        logo=raw.variant.logo,
        enabled=raw.enabled,
        coming_soon=raw.coming_soon,
    )

    flavors: list[ProductFlavor] = []
    seen: set[str] = set()
    for raw_flavor in raw.flavors or []:
        if raw_flavor.name in seen:
            raise ValueError(
                f"duplicate flavor {raw_flavor.name!r} in instance {instance.id!r}"
            )
        seen.add(raw_flavor.name)
        flavors.append(ProductFlavor(
            instance=instance,
            name=raw_flavor.name,
            price=raw_flavor.price * LEGACY_PRICE_RATE,
            mem=raw_flavor.mem,
            mem_formatted=raw_flavor.memory.formatted,
            cpus=raw_flavor.cpus,
            gpus=raw_flavor.gpus,
            available=raw_flavor.available,
            microservice=raw_flavor.microservice,
            machine_learning=raw_flavor.machine_learning,
        ))

    object.__setattr__(instance, "flavors", tuple(flavors))
    return instance
