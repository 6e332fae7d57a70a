from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from hoard.attributes import Condition, FurnitureQuantity, ItemType, Quantity, Rarity, RoomType
from hoard.config import GeneratorConfig
from hoard.core.random import RandomSource
from hoard.exceptions import CatalogError, HoardError
from hoard.generate import generate_items
from hoard.render import render_plan
from hoard.settings import RANDOM_KEYWORD, Settings

logger = logging.getLogger(__name__)


def _choices(enum_cls, allow_random: bool = True) -> list[str]:
    values = [m.value for m in enum_cls]
    if allow_random:
        values.append(RANDOM_KEYWORD)
    return values


def _cmd_generate(args: argparse.Namespace) -> int:
    config = GeneratorConfig.load(Path(args.config) if args.config else None)
    settings = Settings.from_mapping({
        "item_quantity": args.quantity,
        "item_rarity": args.rarity,
        "item_type": args.type,
        "item_condition": args.condition,
        "room_type": args.room,
        "room_condition": args.room_condition,
        "room_furnishing": args.furnishing,
    })
    plan = generate_items(settings, RandomSource(seed=args.seed), config=config)
    for line in render_plan(plan):
        print(line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hoard", description="Generate item hoards and room furnishings")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    p.add_argument("--config", default=None, help="YAML file overriding the generator tables")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate a set of items")
    g.add_argument("--quantity", choices=_choices(Quantity), default=RANDOM_KEYWORD)
    g.add_argument("--rarity", choices=_choices(Rarity), default=RANDOM_KEYWORD)
    g.add_argument("--type", choices=_choices(ItemType), default=RANDOM_KEYWORD)
    g.add_argument("--condition", choices=_choices(Condition), default=RANDOM_KEYWORD)
    g.add_argument("--room", choices=_choices(RoomType, allow_random=False), default=None,
                   help="Generate for a room of this type (adds furnishings)")
    g.add_argument("--room-condition", dest="room_condition",
                   choices=_choices(Condition, allow_random=False), default=None)
    g.add_argument("--furnishing", choices=_choices(FurnitureQuantity), default=RANDOM_KEYWORD)
    g.set_defaults(func=_cmd_generate)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        return args.func(args)
    except CatalogError as e:
        print(e.to_human(), file=sys.stderr)
        return 2
    except HoardError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
