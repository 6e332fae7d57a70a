from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from hoard.attributes import Condition, ItemType, Rarity, Size


@dataclass(frozen=True)
class ItemRecord:
    """
    One generated item or furnishing.

    ``label`` is the display identity used to merge duplicates and may differ
    from ``name``. ``capacity`` is set only on containers; ``quantity`` only on
    items that come as an innate bundle (e.g. 20 arrows).
    """

    name: str
    label: str
    type: ItemType
    size: Size
    rarity: Rarity = Rarity.AVERAGE
    condition: Condition = Condition.AVERAGE
    quantity: Optional[int] = None
    capacity: Optional[float] = None

    @property
    def is_container(self) -> bool:
        return self.capacity is not None


@dataclass(frozen=True)
class CountedRecord(ItemRecord):
    """An ItemRecord together with how many identical labels were generated."""

    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("CountedRecord.count must be at least 1")


@dataclass(frozen=True)
class ContainerLoad:
    container: CountedRecord
    contents: Tuple[CountedRecord, ...]


@dataclass(frozen=True)
class Plan:
    """Structured result of a generation run, ready for rendering."""

    total: int
    in_room: bool = False
    descriptions: Tuple[str, ...] = ()
    containers: Tuple[ContainerLoad, ...] = ()
    uncontained: Tuple[CountedRecord, ...] = ()
    columns: int = 1

    @property
    def title(self) -> str:
        return f"Items ({self.total})"

    @property
    def is_empty(self) -> bool:
        return self.total == 0 and not self.containers and not self.uncontained

    def records(self) -> Tuple[CountedRecord, ...]:
        """Every record in the plan: containers, their contents, then the rest."""
        out = []
        for load in self.containers:
            out.append(load.container)
            out.extend(load.contents)
        out.extend(self.uncontained)
        return tuple(out)


__all__ = ["ItemRecord", "CountedRecord", "ContainerLoad", "Plan"]
