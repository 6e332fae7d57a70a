from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from hoard.attributes import SMALL_SIZES
from hoard.items.models import CountedRecord

logger = logging.getLogger(__name__)


@dataclass
class Classification:
    containers: List[CountedRecord] = field(default_factory=list)
    small_items: List[CountedRecord] = field(default_factory=list)
    remaining: List[CountedRecord] = field(default_factory=list)


def classify(furnishings: Iterable[CountedRecord], items: Iterable[CountedRecord]) -> Classification:
    """
    Split records into containers, small items and everything else.

    Furnishings are visited before items and relative order is kept in every
    bucket. Only items (never furnishings) can be small items.
    """
    result = Classification()

    for record in furnishings:
        if record.is_container:
            result.containers.append(record)
        else:
            result.remaining.append(record)

    for record in items:
        if record.is_container:
            result.containers.append(record)
        elif record.size in SMALL_SIZES:
            result.small_items.append(record)
        else:
            result.remaining.append(record)

    logger.debug(
        "Classified %d containers, %d small items, %d remaining",
        len(result.containers), len(result.small_items), len(result.remaining),
    )
    return result


__all__ = ["Classification", "classify"]
