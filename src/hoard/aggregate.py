"""Merge repeated generations into counted records keyed by label."""
from __future__ import annotations

import logging
from dataclasses import fields, replace
from functools import reduce
from typing import Dict, Iterable, Optional

from hoard.attributes import Condition, text
from hoard.config import GeneratorConfig
from hoard.items.factory import ItemCatalog, generate_item
from hoard.items.models import CountedRecord, ItemRecord
from hoard.settings import Settings

logger = logging.getLogger(__name__)

Counted = Dict[str, CountedRecord]


def _counted(record: ItemRecord) -> CountedRecord:
    return CountedRecord(**{f.name: getattr(record, f.name) for f in fields(ItemRecord)}, count=1)


def _tally(counted: Counted, record: ItemRecord) -> Counted:
    existing = counted.get(record.label)
    if existing is None:
        counted[record.label] = _counted(record)
    else:
        counted[record.label] = replace(existing, count=existing.count + 1)
    return counted


def aggregate_items(records: Iterable[ItemRecord]) -> Counted:
    """Fold records into an insertion-ordered ``label -> CountedRecord`` mapping.

    The first record seen for a label is kept; later ones only bump ``count``.
    """
    return reduce(_tally, records, {})


def furnishing_label(label: str, room_condition: Condition | str) -> str:
    if room_condition == Condition.AVERAGE:
        return label
    return f"{label} ({text(room_condition)})"


def aggregate_furnishings(records: Iterable[ItemRecord], room_condition: Condition | str) -> Counted:
    """Like :func:`aggregate_items`, but labels carry a non-average room condition."""
    return aggregate_items(
        replace(record, label=furnishing_label(record.label, room_condition))
        for record in records
    )


def generate_item_records(
    count: int,
    settings: Settings,
    rng,
    catalog: Optional[ItemCatalog] = None,
    config: Optional[GeneratorConfig] = None,
) -> Counted:
    """Generate ``count`` items and aggregate them."""
    counted = aggregate_items(generate_item(settings, rng, catalog, config) for _ in range(count))
    logger.debug("Generated %d items under %d labels", count, len(counted))
    return counted


__all__ = [
    "aggregate_items",
    "aggregate_furnishings",
    "furnishing_label",
    "generate_item_records",
]
