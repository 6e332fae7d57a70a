"""Greedy assignment of small items into containers.

Containers are filled in order. Each container gets exactly one pass per item
queued when it is reached: an item that does not fit (too big for the space
left, or an oversized bundle) stays at the head of the queue for the next
container. Whatever is still queued once every container has had its pass is
left uncontained.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List, Optional

from hoard.config import GeneratorConfig, default_config
from hoard.items.models import ContainerLoad, CountedRecord

logger = logging.getLogger(__name__)


@dataclass
class PackingResult:
    loads: List[ContainerLoad] = field(default_factory=list)
    empty_containers: List[CountedRecord] = field(default_factory=list)
    leftovers: List[CountedRecord] = field(default_factory=list)


def _fill(container: CountedRecord, queue: Deque[CountedRecord], config: GeneratorConfig) -> List[CountedRecord]:
    contents: List[CountedRecord] = []
    remaining_space = config.capacity_by_size[container.size]

    # Bound fixed at entry; skipped items must not keep the loop alive.
    attempts = len(queue)
    for _ in range(attempts):
        if remaining_space <= 0 or not queue:
            continue

        item = queue[0]

        if item.quantity is not None and item.quantity > config.max_small_item_quantity:
            logger.debug("Skipping %s for %s: bundle of %d too large",
                         item.label, container.label, item.quantity)
            continue

        space_required = config.space_by_size[item.size]
        if remaining_space - space_required < 0:
            logger.debug("Skipping %s for %s: needs %s, %s left",
                         item.label, container.label, space_required, remaining_space)
            continue

        remaining_space -= space_required
        contents.append(queue.popleft())

    return contents


def pack_containers(
    containers: Iterable[CountedRecord],
    small_items: Iterable[CountedRecord],
    config: Optional[GeneratorConfig] = None,
) -> PackingResult:
    """Place small items into containers. Never fails; unfit items become leftovers."""
    config = config or default_config()
    queue: Deque[CountedRecord] = deque(small_items)
    result = PackingResult()

    for container in containers:
        contents = _fill(container, queue, config) if queue else []
        if contents:
            result.loads.append(ContainerLoad(container=container, contents=tuple(contents)))
        else:
            result.empty_containers.append(container)

    result.leftovers = list(queue)
    logger.debug("Packed %d containers (%d empty), %d small items left over",
                 len(result.loads), len(result.empty_containers), len(result.leftovers))
    return result


__all__ = ["PackingResult", "pack_containers"]
