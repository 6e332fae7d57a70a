from hoard.attributes import ItemType, Size
from hoard.classify import classify


def test_partitions_into_three_buckets(record):
    wardrobe = record("Wardrobe", Size.LARGE, type=ItemType.FURNISHING, capacity=5)
    lamp = record("Lamp", Size.SMALL, type=ItemType.FURNISHING)
    table = record("Table", Size.LARGE, type=ItemType.FURNISHING)

    sack = record("Sack", Size.MEDIUM, type=ItemType.CONTAINER, capacity=2)
    ring = record("Ring", Size.TINY)
    hat = record("Hat", Size.SMALL)
    shield = record("Shield", Size.MEDIUM)
    pouch = record("Belt pouch", Size.TINY, capacity=0.5)

    result = classify([wardrobe, lamp, table], [sack, ring, hat, shield, pouch])

    assert result.containers == [wardrobe, sack, pouch]
    assert result.small_items == [ring, hat]
    assert result.remaining == [lamp, table, shield]


def test_small_furnishings_are_never_small_items(record):
    candelabra = record("Candelabra", Size.SMALL, type=ItemType.FURNISHING)

    result = classify([candelabra], [])

    assert result.small_items == []
    assert result.remaining == [candelabra]


def test_empty_input():
    result = classify([], [])

    assert result.containers == []
    assert result.small_items == []
    assert result.remaining == []
