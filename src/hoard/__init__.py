"""Procedural item hoards: generate, count, and pack items into containers."""

from .attributes import (
    RANDOM,
    Condition,
    FurnitureQuantity,
    ItemType,
    Quantity,
    Rarity,
    RoomType,
    Size,
)
from .core.random import RandomSource
from .exceptions import CatalogError, HoardError, InvalidSettingError, MissingConfigurationError
from .generate import generate_items
from .items.models import ContainerLoad, CountedRecord, ItemRecord, Plan
from .render import render_plan
from .settings import Settings

__all__ = [
    "RANDOM",
    "Condition",
    "FurnitureQuantity",
    "ItemType",
    "Quantity",
    "Rarity",
    "RoomType",
    "Size",
    "RandomSource",
    "HoardError",
    "MissingConfigurationError",
    "InvalidSettingError",
    "CatalogError",
    "generate_items",
    "ItemRecord",
    "CountedRecord",
    "ContainerLoad",
    "Plan",
    "render_plan",
    "Settings",
]

__version__ = "0.1.0"
