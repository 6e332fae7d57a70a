"""Item generation pipeline.

``generate_items`` validates the settings, rolls the item count, generates and
aggregates items (and furnishings when a room is given), sorts the records into
containers / small items / the rest, packs the small items and returns a
:class:`~hoard.items.models.Plan`.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from hoard.aggregate import aggregate_furnishings, generate_item_records
from hoard.attributes import RANDOM, Quantity
from hoard.classify import classify
from hoard.config import GeneratorConfig, default_config
from hoard.core.random import RandomSource
from hoard.descriptions import get_condition_description, get_rarity_description
from hoard.exceptions import MissingConfigurationError
from hoard.furnishing import FurnishingCatalog, generate_furnishings
from hoard.items.factory import ItemCatalog
from hoard.items.models import Plan
from hoard.packing import pack_containers
from hoard.quantity import get_item_count, resolve_quantity
from hoard.settings import Settings

logger = logging.getLogger(__name__)


def validate_settings(settings: Settings) -> None:
    """Raise MissingConfigurationError for the first missing required knob."""
    if settings.item_quantity is None:
        raise MissingConfigurationError("item quantity")
    if settings.item_rarity is None:
        raise MissingConfigurationError("item rarity")
    if settings.item_type is None:
        raise MissingConfigurationError("item type")
    if settings.item_condition is None:
        raise MissingConfigurationError("item condition")
    if settings.in_room and settings.room_condition is None:
        raise MissingConfigurationError("room condition required for room")


def get_columns(count: int, max_columns: int) -> int:
    return min(max_columns, max(1, count // max_columns))


def get_descriptions(settings: Settings, quantity: Quantity) -> List[str]:
    """Condition then rarity text, only for concrete knobs and more than one item."""
    if quantity is Quantity.ONE:
        return []

    descriptions = []
    if settings.item_condition is not RANDOM:
        condition = get_condition_description(settings.item_condition)
        if condition:
            descriptions.append(condition)
    if settings.item_rarity is not RANDOM:
        rarity = get_rarity_description(settings.item_rarity)
        if rarity:
            descriptions.append(rarity)
    return descriptions


def generate_items(
    settings: Settings,
    rng=None,
    *,
    item_catalog: Optional[ItemCatalog] = None,
    furnishing_catalog: Optional[FurnishingCatalog] = None,
    config: Optional[GeneratorConfig] = None,
) -> Plan:
    validate_settings(settings)

    rng = rng if rng is not None else RandomSource()
    config = config or default_config()
    in_room = settings.in_room

    quantity = resolve_quantity(settings.item_quantity, rng, config)
    if quantity is Quantity.ZERO:
        logger.debug("Item quantity is zero; nothing to generate")
        return Plan(total=0, in_room=in_room)

    count = get_item_count(quantity, rng, config)
    items = generate_item_records(count, settings, rng, item_catalog, config)

    furnishings = []
    if in_room:
        furnishings = generate_furnishings(
            settings.room_type, settings.room_furnishing, rng, furnishing_catalog, config
        )
    furnishing_records = aggregate_furnishings(furnishings, settings.room_condition) if furnishings else {}

    total = count + len(furnishings)

    buckets = classify(furnishing_records.values(), items.values())
    packed = pack_containers(buckets.containers, buckets.small_items, config)

    uncontained = tuple(buckets.remaining + packed.leftovers + packed.empty_containers)
    max_columns = config.max_columns_room if in_room else config.max_columns_items

    plan = Plan(
        total=total,
        in_room=in_room,
        descriptions=tuple(get_descriptions(settings, quantity)),
        containers=tuple(packed.loads),
        uncontained=uncontained,
        columns=get_columns(len(uncontained), max_columns),
    )
    logger.debug("Generated %d items (%d furnishings) in %d containers, %d loose",
                total, len(furnishings), len(plan.containers), len(uncontained))
    return plan


__all__ = ["generate_items", "validate_settings", "get_columns", "get_descriptions"]
