from __future__ import annotations

from typing import List, Sequence

from hoard.descriptions import get_item_description
from hoard.items.models import Plan

INDENT = "  "
BULLET = "- "
COLUMN_GAP = 4


def _columns(entries: Sequence[str], columns: int) -> List[str]:
    """Lay entries out top-to-bottom across ``columns`` columns."""
    if columns <= 1 or len(entries) <= 1:
        return [BULLET + e for e in entries]

    rows = -(-len(entries) // columns)
    cells = [BULLET + e for e in entries]
    width = max(len(c) for c in cells) + COLUMN_GAP
    lines = []
    for r in range(rows):
        row = [cells[i] for i in range(r, len(cells), rows)]
        lines.append("".join(c.ljust(width) for c in row[:-1]) + row[-1])
    return lines


def render_plan(plan: Plan) -> List[str]:
    """Render a plan as text lines: title, descriptions, containers, loose items.

    An empty plan generated for a room renders to nothing.
    """
    if plan.in_room and plan.is_empty:
        return []

    lines = [plan.title]
    if plan.descriptions:
        lines.append(" | ".join(plan.descriptions))

    for load in plan.containers:
        lines.append(get_item_description(load.container))
        lines.extend(INDENT + BULLET + get_item_description(item) for item in load.contents)

    if plan.uncontained:
        lines.extend(_columns([get_item_description(r) for r in plan.uncontained], plan.columns))

    return lines


__all__ = ["render_plan"]
