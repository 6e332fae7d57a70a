from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Type

from hoard.attributes import (
    RANDOM,
    Condition,
    ConditionSelector,
    FurnitureQuantity,
    FurnitureSelector,
    ItemType,
    ItemTypeSelector,
    Quantity,
    QuantitySelector,
    Rarity,
    RaritySelector,
    RandomSelector,
    RoomType,
)
from hoard.exceptions import InvalidSettingError

logger = logging.getLogger(__name__)

RANDOM_KEYWORD = "random"


@dataclass(frozen=True)
class Settings:
    """Knob values for one generation run.

    Item knobs are left optional so that ``generate_items`` can report exactly
    which one is missing. Plain strings such as ``"few"`` or ``"random"`` are
    coerced to their enum member (or ``RANDOM``) on construction.
    """

    item_quantity: Optional[QuantitySelector] = None
    item_rarity: Optional[RaritySelector] = None
    item_type: Optional[ItemTypeSelector] = None
    item_condition: Optional[ConditionSelector] = None
    room_type: Optional[RoomType] = None
    room_condition: Optional[Condition] = None
    room_furnishing: Optional[FurnitureSelector] = None

    def __post_init__(self) -> None:
        for knob, (enum_cls, allow_random) in _KNOBS.items():
            raw = getattr(self, knob)
            # frozen dataclass: bypass __setattr__ to store the coerced value
            object.__setattr__(self, knob, self._parse(knob, raw, enum_cls, allow_random))

    @property
    def in_room(self) -> bool:
        return self.room_type is not None

    @staticmethod
    def _parse(knob: str, raw: Any, enum_cls: Type[Enum], allow_random: bool = True):
        if raw is None or raw == "":
            return None
        if isinstance(raw, enum_cls):
            return raw
        if isinstance(raw, RandomSelector):
            if allow_random:
                return raw
            raise InvalidSettingError(knob, RANDOM_KEYWORD, [m.value for m in enum_cls])
        value = str(raw).strip().lower()
        if allow_random and value == RANDOM_KEYWORD:
            return RANDOM
        try:
            return enum_cls(value)
        except ValueError:
            choices = [m.value for m in enum_cls]
            if allow_random:
                choices.append(RANDOM_KEYWORD)
            raise InvalidSettingError(knob, raw, choices) from None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        """Build settings from plain strings, e.g. parsed CLI or form values."""
        settings = cls(**{knob: data.get(knob) for knob in _KNOBS})
        logger.debug("Parsed settings: %s", settings)
        return settings


_KNOBS = {
    "item_quantity": (Quantity, True),
    "item_rarity": (Rarity, True),
    "item_type": (ItemType, True),
    "item_condition": (Condition, True),
    "room_type": (RoomType, False),
    "room_condition": (Condition, False),
    "room_furnishing": (FurnitureQuantity, True),
}


__all__ = ["Settings", "RANDOM_KEYWORD"]
