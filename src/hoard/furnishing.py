from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from hoard.attributes import RANDOM, FurnitureQuantity, FurnitureSelector, ItemType, RoomType, Size
from hoard.config import GeneratorConfig, default_config
from hoard.data.loader import load_file, load_resource
from hoard.exceptions import CatalogError
from hoard.items.models import ItemRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FurnishingCatalog:
    """Static furnishing tables.

    Attributes:
        furniture: every furnishing record, in catalog order.
        any_room: records valid in any room type.
        by_room: records specific to a room type.
        required: records always placed in a room of that type.
    """

    furniture: Tuple[ItemRecord, ...]
    any_room: Tuple[ItemRecord, ...] = ()
    by_room: Mapping[RoomType, Tuple[ItemRecord, ...]] = field(default_factory=dict)
    required: Mapping[RoomType, Tuple[ItemRecord, ...]] = field(default_factory=dict)

    def candidates(self, room_type: RoomType) -> Tuple[ItemRecord, ...]:
        """Records an extra furnishing is drawn from for ``room_type``."""
        specific = self.by_room.get(room_type)
        if not specific:
            return self.furniture
        return self.any_room + specific

    @classmethod
    def from_dict(cls, data: Mapping, config: Optional[GeneratorConfig] = None) -> "FurnishingCatalog":
        config = config or default_config()
        records: Dict[str, ItemRecord] = {}
        for key, raw in data["furniture"].items():
            size = Size(raw["size"])
            records[key] = ItemRecord(
                name=raw["name"],
                label=raw["name"],
                type=ItemType.FURNISHING,
                size=size,
                capacity=config.capacity_by_size[size] if raw.get("container") else None,
            )

        def lookup(ids, where: str) -> Tuple[ItemRecord, ...]:
            missing = [i for i in ids if i not in records]
            if missing:
                raise CatalogError(f"Unknown furniture ids in {where}: {', '.join(missing)}")
            return tuple(records[i] for i in ids)

        def by_room(section: str) -> Dict[RoomType, Tuple[ItemRecord, ...]]:
            return {
                RoomType(room): lookup(ids, f"{section}.{room}")
                for room, ids in (data.get(section) or {}).items()
            }

        return cls(
            furniture=tuple(records.values()),
            any_room=lookup(data.get("any_room") or [], "any_room"),
            by_room=by_room("by_room"),
            required=by_room("required"),
        )


def load_furnishing_catalog(path: Optional[Path] = None,
                            config: Optional[GeneratorConfig] = None) -> FurnishingCatalog:
    if path is None:
        data = load_resource("furnishings.yaml", schema_name="furnishings")
    else:
        data = load_file(path, schema_name="furnishings")
    catalog = FurnishingCatalog.from_dict(data, config)
    logger.debug("Furnishing catalog has %d pieces", len(catalog.furniture))
    return catalog


@lru_cache(maxsize=1)
def default_furnishing_catalog() -> FurnishingCatalog:
    return load_furnishing_catalog()


def resolve_furniture_quantity(selector: Optional[FurnitureSelector], rng) -> FurnitureQuantity:
    """``RANDOM`` picks any quantity except ``none``; a missing selector means ``none``."""
    if selector is None:
        return FurnitureQuantity.NONE
    if selector is RANDOM:
        return rng.choice([q for q in FurnitureQuantity if q is not FurnitureQuantity.NONE])
    return selector


def _sized_for(record: ItemRecord, config: GeneratorConfig) -> ItemRecord:
    """Re-read a container's capacity from the active size table."""
    if record.capacity is None:
        return record
    capacity = config.capacity_by_size[record.size]
    if capacity == record.capacity:
        return record
    return replace(record, capacity=capacity)


def generate_furnishings(
    room_type: RoomType,
    quantity: Optional[FurnitureSelector],
    rng,
    catalog: Optional[FurnishingCatalog] = None,
    config: Optional[GeneratorConfig] = None,
) -> List[ItemRecord]:
    """
    Generate the furnishings for one room: required pieces first, then
    randomly drawn extras. Duplicates are expected and merged later.

    A quantity of ``none`` means no furniture at all, required pieces included.
    Container capacities follow ``config`` even when the catalog was built
    against another size table.
    """
    quantity = resolve_furniture_quantity(quantity, rng)
    if quantity is FurnitureQuantity.NONE:
        return []

    catalog = catalog or default_furnishing_catalog()
    config = config or default_config()

    furniture: List[ItemRecord] = list(catalog.required.get(room_type, ()))

    extra = rng.roll(1, config.furnishing_quantity_ranges[quantity])
    candidates = catalog.candidates(room_type)
    for _ in range(extra):
        furniture.append(rng.choice(candidates))

    logger.debug("Furnished %s (%s): %d required, %d extra",
                 room_type.value, quantity.value, len(furniture) - extra, extra)
    return [_sized_for(record, config) for record in furniture]


__all__ = [
    "FurnishingCatalog",
    "load_furnishing_catalog",
    "default_furnishing_catalog",
    "resolve_furniture_quantity",
    "generate_furnishings",
]
