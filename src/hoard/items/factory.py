from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from hoard.attributes import (
    GENERATED_ITEM_TYPES,
    NOTABLE_RARITIES,
    RANDOM,
    Condition,
    ItemType,
    Rarity,
    Size,
)
from hoard.config import GeneratorConfig, default_config
from hoard.data.loader import load_file, load_resource
from hoard.items.models import ItemRecord
from hoard.settings import Settings

logger = logging.getLogger(__name__)

FALLBACK_NAME = "Mysterious object"


@dataclass(frozen=True)
class CatalogItem:
    """
    One catalog entry: the fixed facts about an item before rarity and
    condition are applied.
    """

    name: str
    type: ItemType
    rarity: Rarity
    size: Size
    quantity: Optional[int] = None
    container: bool = False

    @property
    def is_container(self) -> bool:
        return self.container or self.type is ItemType.CONTAINER


class ItemCatalog:
    """Catalog entries indexed by (type, rarity) for quick draws."""

    def __init__(self, items: Sequence[CatalogItem]) -> None:
        self.items: Tuple[CatalogItem, ...] = tuple(items)
        self._by_type: Dict[ItemType, List[CatalogItem]] = {}
        for item in self.items:
            self._by_type.setdefault(item.type, []).append(item)

    def __len__(self) -> int:
        return len(self.items)

    def candidates(self, item_type: ItemType, rarity: Rarity) -> List[CatalogItem]:
        """Entries of the type and rarity, else any entry of the type."""
        of_type = self._by_type.get(item_type, [])
        exact = [i for i in of_type if i.rarity is rarity]
        return exact or of_type

    @classmethod
    def from_dict(cls, data: Dict) -> "ItemCatalog":
        return cls([
            CatalogItem(
                name=raw["name"],
                type=ItemType(raw["type"]),
                rarity=Rarity(raw["rarity"]),
                size=Size(raw["size"]),
                quantity=raw.get("quantity"),
                container=bool(raw.get("container", False)),
            )
            for raw in data.get("items", [])
        ])


def load_item_catalog(path: Optional[Path] = None) -> ItemCatalog:
    if path is None:
        data = load_resource("items.yaml", schema_name="items")
    else:
        data = load_file(path, schema_name="items")
    catalog = ItemCatalog.from_dict(data)
    logger.debug("Item catalog has %d entries", len(catalog))
    return catalog


@lru_cache(maxsize=1)
def default_item_catalog() -> ItemCatalog:
    return load_item_catalog()


def make_label(name: str, rarity: Rarity, condition: Condition) -> str:
    """Name plus the qualifiers worth showing, e.g. ``Rope (rare, busted)``."""
    qualifiers = []
    if rarity in NOTABLE_RARITIES:
        qualifiers.append(rarity.value)
    if condition is not Condition.AVERAGE:
        qualifiers.append(condition.value)
    if not qualifiers:
        return name
    return f"{name} ({', '.join(qualifiers)})"


def generate_item(
    settings: Settings,
    rng,
    catalog: Optional[ItemCatalog] = None,
    config: Optional[GeneratorConfig] = None,
) -> ItemRecord:
    """Generate a single item record from the settings' rarity, type and condition knobs."""
    if catalog is None:
        catalog = default_item_catalog()
    config = config or default_config()

    rarity = settings.item_rarity
    if rarity is RANDOM:
        rarity = rng.weighted_choice(dict(config.rarity_weights))

    item_type = settings.item_type
    if item_type is RANDOM:
        item_type = rng.choice(GENERATED_ITEM_TYPES)

    condition = settings.item_condition
    if condition is RANDOM:
        condition = rng.weighted_choice(dict(config.condition_weights))

    candidates = catalog.candidates(item_type, rarity)
    if candidates:
        entry = rng.choice(candidates)
        name, size, quantity, is_container = entry.name, entry.size, entry.quantity, entry.is_container
    else:
        logger.debug("No catalog entry for type=%s; using fallback item", item_type.value)
        name, size, quantity, is_container = FALLBACK_NAME, Size.SMALL, None, False

    return ItemRecord(
        name=name,
        label=make_label(name, rarity, condition),
        type=item_type,
        size=size,
        rarity=rarity,
        condition=condition,
        quantity=quantity,
        capacity=config.capacity_by_size[size] if is_container else None,
    )


__all__ = [
    "CatalogItem",
    "ItemCatalog",
    "load_item_catalog",
    "default_item_catalog",
    "make_label",
    "generate_item",
    "FALLBACK_NAME",
]
