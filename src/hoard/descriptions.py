from __future__ import annotations

from typing import Dict, Optional

from hoard.attributes import Condition, Rarity
from hoard.items.models import ItemRecord

# Average values read as "nothing to note" and carry no text.
CONDITION_DESCRIPTIONS: Dict[Condition, str] = {
    Condition.DECAYING: "Item Condition: Decaying, rotting and falling apart",
    Condition.BUSTED: "Item Condition: Busted, barely holding together",
    Condition.POOR: "Item Condition: Poor, worn and scuffed",
    Condition.GOOD: "Item Condition: Good, well kept",
    Condition.EXQUISITE: "Item Condition: Exquisite, pristine craftsmanship",
}

RARITY_DESCRIPTIONS: Dict[Rarity, str] = {
    Rarity.ABUNDANT: "Item Rarity: Abundant",
    Rarity.COMMON: "Item Rarity: Common",
    Rarity.UNCOMMON: "Item Rarity: Uncommon",
    Rarity.RARE: "Item Rarity: Rare",
    Rarity.EXOTIC: "Item Rarity: Exotic",
    Rarity.LEGENDARY: "Item Rarity: Legendary",
}


def get_condition_description(condition: Condition) -> Optional[str]:
    return CONDITION_DESCRIPTIONS.get(condition)


def get_rarity_description(rarity: Rarity) -> Optional[str]:
    return RARITY_DESCRIPTIONS.get(rarity)


def get_item_description(record: ItemRecord) -> str:
    """One-line text for a record, e.g. ``Arrows, 20 x3``."""
    desc = record.label
    if record.quantity is not None and record.quantity > 1:
        desc = f"{desc}, {record.quantity}"
    count = getattr(record, "count", 1)
    if count > 1:
        desc = f"{desc} x{count}"
    return desc


__all__ = [
    "CONDITION_DESCRIPTIONS",
    "RARITY_DESCRIPTIONS",
    "get_condition_description",
    "get_rarity_description",
    "get_item_description",
]
