from __future__ import annotations

from enum import Enum
from typing import Union


class RandomSelector:
    """Marker type for a knob left to chance.

    Only one instance exists (``RANDOM``); it is never equal to an enum member.
    """

    _instance: "RandomSelector | None" = None

    def __new__(cls) -> "RandomSelector":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "RANDOM"

    def __reduce__(self):
        return (RandomSelector, ())


RANDOM = RandomSelector()


class Quantity(str, Enum):
    ZERO = "zero"
    ONE = "one"
    COUPLE = "couple"
    FEW = "few"
    SOME = "some"
    SEVERAL = "several"
    MANY = "many"
    NUMEROUS = "numerous"


class Rarity(str, Enum):
    ABUNDANT = "abundant"
    COMMON = "common"
    AVERAGE = "average"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EXOTIC = "exotic"
    LEGENDARY = "legendary"


class Condition(str, Enum):
    DECAYING = "decaying"
    BUSTED = "busted"
    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"
    EXQUISITE = "exquisite"


class Size(str, Enum):
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    MASSIVE = "massive"


class ItemType(str, Enum):
    AMMO = "ammo"
    ARMOR = "armor"
    CLOTHING = "clothing"
    COIN = "coin"
    CONTAINER = "container"
    FOOD = "food"
    FURNISHING = "furnishing"
    KITCHEN = "kitchen"
    LIQUID = "liquid"
    MISCELLANEOUS = "miscellaneous"
    MYSTERIOUS = "mysterious"
    MYSTIC = "mystic"
    POTION = "potion"
    SURVIVAL = "survival"
    TOOL = "tool"
    TREASURE = "treasure"
    TRINKET = "trinket"
    WEAPON = "weapon"


class FurnitureQuantity(str, Enum):
    NONE = "none"
    MINIMUM = "minimum"
    SPARSE = "sparse"
    AVERAGE = "average"
    FURNISHED = "furnished"


class RoomType(str, Enum):
    ARMORY = "armory"
    ATRIUM = "atrium"
    BEDROOM = "bedroom"
    DINING = "dining"
    KITCHEN = "kitchen"
    LABORATORY = "laboratory"
    LIBRARY = "library"
    PANTRY = "pantry"
    PRISON = "prison"
    ROOM = "room"
    SHRINE = "shrine"
    SMITHY = "smithy"
    STORAGE = "storage"
    STUDY = "study"
    TREASURY = "treasury"


SMALL_SIZES = frozenset({Size.TINY, Size.SMALL})

# Item types the item factory draws from; furnishings come from their own catalog.
GENERATED_ITEM_TYPES = tuple(t for t in ItemType if t is not ItemType.FURNISHING)

# Rarities worth calling out in an item's label.
NOTABLE_RARITIES = frozenset({Rarity.UNCOMMON, Rarity.RARE, Rarity.EXOTIC, Rarity.LEGENDARY})

QuantitySelector = Union[Quantity, RandomSelector]
RaritySelector = Union[Rarity, RandomSelector]
ConditionSelector = Union[Condition, RandomSelector]
ItemTypeSelector = Union[ItemType, RandomSelector]
FurnitureSelector = Union[FurnitureQuantity, RandomSelector]


def text(value: object) -> str:
    """Plain string form of an enum member or raw string."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


__all__ = [
    "RANDOM",
    "RandomSelector",
    "Quantity",
    "Rarity",
    "Condition",
    "Size",
    "ItemType",
    "FurnitureQuantity",
    "RoomType",
    "SMALL_SIZES",
    "GENERATED_ITEM_TYPES",
    "NOTABLE_RARITIES",
    "QuantitySelector",
    "RaritySelector",
    "ConditionSelector",
    "ItemTypeSelector",
    "FurnitureSelector",
    "text",
]
