import pytest

from hoard.attributes import RANDOM, Condition, FurnitureQuantity, ItemType, Quantity, Rarity, RoomType, Size
from hoard.config import default_config
from hoard.core.random import RandomSource
from hoard.exceptions import MissingConfigurationError
from hoard.generate import generate_items, get_columns
from hoard.render import render_plan
from hoard.settings import Settings

BASE = Settings(
    item_quantity=Quantity.ONE,
    item_rarity=Rarity.AVERAGE,
    item_type=ItemType.CLOTHING,
    item_condition=Condition.AVERAGE,
)

ALL_RANDOM = Settings(
    item_quantity=RANDOM,
    item_rarity=RANDOM,
    item_type=RANDOM,
    item_condition=RANDOM,
)


def in_room(settings, room=RoomType.BEDROOM, condition=Condition.AVERAGE, furnishing=RANDOM):
    return Settings(
        item_quantity=settings.item_quantity,
        item_rarity=settings.item_rarity,
        item_type=settings.item_type,
        item_condition=settings.item_condition,
        room_type=room,
        room_condition=condition,
        room_furnishing=furnishing,
    )


def with_quantity(settings, quantity, **overrides):
    values = dict(
        item_quantity=quantity,
        item_rarity=settings.item_rarity,
        item_type=settings.item_type,
        item_condition=settings.item_condition,
        room_type=settings.room_type,
        room_condition=settings.room_condition,
        room_furnishing=settings.room_furnishing,
    )
    values.update(overrides)
    return Settings(**values)


def test_single_clothing_item(rng):
    plan = generate_items(BASE, rng)

    assert render_plan(plan)[0] == "Items (1)"
    assert plan.total == 1
    [item] = plan.records()
    assert item.type is ItemType.CLOTHING
    assert item.count == 1


def test_render_returns_strings(rng):
    lines = render_plan(generate_items(BASE, rng))

    assert lines
    assert all(isinstance(line, str) for line in lines)


@pytest.mark.parametrize(
    "field, message",
    [
        ("item_quantity", "item quantity"),
        ("item_rarity", "item rarity"),
        ("item_type", "item type"),
        ("item_condition", "item condition"),
    ],
)
def test_missing_required_knob_raises(field, message):
    values = dict(
        item_quantity=BASE.item_quantity,
        item_rarity=BASE.item_rarity,
        item_type=BASE.item_type,
        item_condition=BASE.item_condition,
    )
    values[field] = None

    with pytest.raises(MissingConfigurationError, match=message):
        generate_items(Settings(**values))


def test_room_without_condition_raises():
    settings = with_quantity(BASE, Quantity.ONE, room_type=RoomType.ROOM)

    with pytest.raises(MissingConfigurationError, match="room condition required for room"):
        generate_items(settings)


def test_validation_happens_before_any_randomness(scripted):
    with pytest.raises(MissingConfigurationError):
        generate_items(Settings(item_quantity=RANDOM), scripted)
    assert scripted.rolls == []


def test_zero_without_room_is_title_only(rng):
    plan = generate_items(with_quantity(BASE, Quantity.ZERO), rng)

    assert plan.total == 0
    assert render_plan(plan) == ["Items (0)"]


def test_zero_in_room_is_empty(rng):
    plan = generate_items(with_quantity(in_room(BASE, RoomType.ROOM), Quantity.ZERO), rng)

    assert plan.records() == ()
    assert render_plan(plan) == []


def test_random_zero_quantity_is_resolved_first(scripted):
    scripted.quantity = Quantity.ZERO

    plan = generate_items(with_quantity(BASE, RANDOM), scripted)

    assert render_plan(plan) == ["Items (0)"]


def test_quantity_one_never_describes(rng):
    settings = with_quantity(BASE, Quantity.ONE, item_rarity=Rarity.RARE, item_condition=Condition.GOOD)

    assert generate_items(settings, rng).descriptions == ()


def test_descriptions_for_concrete_knobs(rng):
    settings = with_quantity(BASE, Quantity.FEW, item_rarity=Rarity.RARE, item_condition=Condition.GOOD)

    plan = generate_items(settings, rng)

    assert len(plan.descriptions) == 2
    assert "Condition" in plan.descriptions[0]
    assert "Rarity" in plan.descriptions[1]
    assert render_plan(plan)[1] == " | ".join(plan.descriptions)


def test_random_knobs_are_not_described(rng):
    assert generate_items(with_quantity(ALL_RANDOM, Quantity.FEW), rng).descriptions == ()


def test_average_knobs_have_no_description(rng):
    assert generate_items(with_quantity(BASE, Quantity.FEW), rng).descriptions == ()


def test_furnishing_none_in_room_with_required_furniture(rng):
    settings = in_room(with_quantity(BASE, Quantity.ONE), RoomType.SMITHY, furnishing=FurnitureQuantity.NONE)

    plan = generate_items(settings, rng)

    assert plan.total == 1
    assert all(r.type is not ItemType.FURNISHING for r in plan.records())


def test_room_furnishings_carry_room_condition(rng):
    settings = in_room(BASE, RoomType.SMITHY, condition=Condition.BUSTED,
                       furnishing=FurnitureQuantity.MINIMUM)

    plan = generate_items(settings, rng)

    furnishings = [r for r in plan.records() if r.type is ItemType.FURNISHING]
    assert {r.label for r in furnishings} >= {"Anvil (busted)", "Forge (busted)"}


def test_total_counts_items_and_furnishings(scripted):
    settings = in_room(with_quantity(BASE, Quantity.FEW), RoomType.SMITHY,
                       furnishing=FurnitureQuantity.MINIMUM)

    plan = generate_items(settings, scripted)

    # few rolls 4 items; smithy gets anvil + forge + one extra
    assert plan.total == 4 + 3


def test_columns():
    assert get_columns(0, 4) == 1
    assert get_columns(3, 4) == 1
    assert get_columns(8, 4) == 2
    assert get_columns(100, 4) == 4
    assert get_columns(5, 2) == 2
    assert get_columns(40, 2) == 2


def test_room_uses_narrower_columns(rng):
    settings = in_room(with_quantity(ALL_RANDOM, Quantity.NUMEROUS), RoomType.STORAGE,
                       furnishing=FurnitureQuantity.FURNISHED)

    plan = generate_items(settings, rng)

    assert 1 <= plan.columns <= default_config().max_columns_room


@pytest.mark.parametrize("seed", range(40))
def test_pipeline_invariants(seed):
    rng = RandomSource(seed=seed)
    settings = in_room(
        with_quantity(ALL_RANDOM, rng.choice([Quantity.SOME, Quantity.MANY, Quantity.NUMEROUS])),
        rng.choice(list(RoomType)),
        condition=rng.choice(list(Condition)),
        furnishing=FurnitureQuantity.FURNISHED,
    ) if seed % 2 else with_quantity(ALL_RANDOM, Quantity.NUMEROUS)

    plan = generate_items(settings, rng)
    config = default_config()

    records = plan.records()
    # nothing lost, nothing duplicated
    assert sum(r.count for r in records) == plan.total
    assert len({r.label for r in records}) == len(records)

    for load in plan.containers:
        assert load.contents
        assert load.container.capacity is not None
        used = sum(config.space_by_size[item.size] for item in load.contents)
        assert used <= config.capacity_by_size[load.container.size]
        for item in load.contents:
            assert item.size in (Size.TINY, Size.SMALL)
            assert item.quantity is None or item.quantity <= config.max_small_item_quantity
            assert item.type is not ItemType.FURNISHING

    max_columns = config.max_columns_room if plan.in_room else config.max_columns_items
    assert 1 <= plan.columns <= max_columns


def test_same_seed_same_plan():
    settings = in_room(with_quantity(ALL_RANDOM, Quantity.MANY), RoomType.KITCHEN,
                       furnishing=FurnitureQuantity.AVERAGE)

    assert generate_items(settings, RandomSource(seed=99)) == generate_items(settings, RandomSource(seed=99))


@pytest.mark.parametrize("quantity", ["one", "few", "random"])
def test_plain_string_settings_generate(quantity):
    settings = Settings(item_quantity=quantity, item_rarity="average",
                        item_type="clothing", item_condition="average")

    plan = generate_items(settings, RandomSource(seed=1))

    assert all(r.type is ItemType.CLOTHING for r in plan.records())
    assert sum(r.count for r in plan.records()) == plan.total
    if quantity == "one":
        assert render_plan(plan)[0] == "Items (1)"


def test_generation_logs_below_info(rng, caplog):
    with caplog.at_level("INFO", logger="hoard.generate"):
        generate_items(ALL_RANDOM, rng)

    assert not [r for r in caplog.records if r.name == "hoard.generate"]
