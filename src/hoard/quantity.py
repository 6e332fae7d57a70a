from __future__ import annotations

import logging
from typing import Optional, Tuple

from hoard.attributes import RANDOM, Quantity, QuantitySelector
from hoard.config import GeneratorConfig, default_config

logger = logging.getLogger(__name__)


def resolve_quantity(selector: QuantitySelector, rng, config: Optional[GeneratorConfig] = None) -> Quantity:
    """Turn ``RANDOM`` into a weighted draw; concrete quantities pass through."""
    if selector is RANDOM:
        config = config or default_config()
        quantity = rng.weighted_choice(dict(config.quantity_weights))
        logger.debug("Rolled random item quantity: %s", quantity.value)
        return quantity
    return selector


def get_range(quantity: Quantity, config: Optional[GeneratorConfig] = None) -> Tuple[int, int]:
    """Return the ``(min, max)`` count range for a quantity, max exclusive.

    A quantity's range runs up to the next quantity's minimum; the last one is
    capped at ``quantity_maximum``.
    """
    config = config or default_config()
    members = list(Quantity)
    index = members.index(quantity)
    low = config.quantity_minimum[quantity]
    if index + 1 < len(members):
        high = config.quantity_minimum[members[index + 1]]
    else:
        high = config.quantity_maximum
    return low, high


def get_item_count(quantity: Quantity, rng, config: Optional[GeneratorConfig] = None) -> int:
    if quantity is Quantity.ZERO:
        return 0
    low, high = get_range(quantity, config)
    return rng.roll(low, high)


__all__ = ["resolve_quantity", "get_range", "get_item_count"]
