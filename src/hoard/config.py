from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from hoard.attributes import Condition, FurnitureQuantity, Quantity, Rarity, Size
from hoard.data.loader import load_file, load_resource

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HOARD_CONFIG"


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class GeneratorConfig:
    """Static tables driving quantity rolls, furnishing rolls and packing."""

    max_columns_items: int = 4
    max_columns_room: int = 2
    max_small_item_quantity: int = 10
    quantity_maximum: int = 100
    quantity_minimum: Mapping[Quantity, int] = field(default_factory=dict)
    quantity_weights: Mapping[Quantity, float] = field(default_factory=dict)
    furnishing_quantity_ranges: Mapping[FurnitureQuantity, int] = field(default_factory=dict)
    capacity_by_size: Mapping[Size, float] = field(default_factory=dict)
    space_by_size: Mapping[Size, float] = field(default_factory=dict)
    rarity_weights: Mapping[Rarity, float] = field(default_factory=dict)
    condition_weights: Mapping[Condition, float] = field(default_factory=dict)

    @staticmethod
    def _deep_merge(base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = GeneratorConfig._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneratorConfig":
        def table(key: str, enum_cls):
            return _frozen({enum_cls(k): v for k, v in data.get(key, {}).items()})

        return cls(
            max_columns_items=int(data.get("max_columns_items", 4)),
            max_columns_room=int(data.get("max_columns_room", 2)),
            max_small_item_quantity=int(data.get("max_small_item_quantity", 10)),
            quantity_maximum=int(data.get("quantity_maximum", 100)),
            quantity_minimum=table("quantity_minimum", Quantity),
            quantity_weights=table("quantity_weights", Quantity),
            furnishing_quantity_ranges=table("furnishing_quantity_ranges", FurnitureQuantity),
            capacity_by_size=table("capacity_by_size", Size),
            space_by_size=table("space_by_size", Size),
            rarity_weights=table("rarity_weights", Rarity),
            condition_weights=table("condition_weights", Condition),
        )

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "GeneratorConfig":
        """Load the packaged defaults and overlay an optional user YAML file.

        When ``user_path`` is None the ``HOARD_CONFIG`` environment variable is
        consulted.
        """
        defaults = load_resource("defaults.yaml", schema_name="config")

        if user_path is None and os.environ.get(CONFIG_ENV_VAR):
            user_path = Path(os.environ[CONFIG_ENV_VAR])

        user_data: dict = {}
        if user_path is not None:
            user_path = Path(user_path)
            if user_path.exists():
                user_data = load_file(user_path, schema_name="config")
                logger.info("Loaded user generator config from %s", user_path)
            else:
                logger.warning("User generator config not found: %s", user_path)

        config = cls.from_dict(cls._deep_merge(defaults, user_data))
        logger.debug("Generator config: %s", config)
        return config


@lru_cache(maxsize=1)
def default_config() -> GeneratorConfig:
    """Packaged defaults only; cached since they never change at runtime."""
    return GeneratorConfig.from_dict(load_resource("defaults.yaml", schema_name="config"))


__all__ = ["GeneratorConfig", "default_config", "CONFIG_ENV_VAR"]
