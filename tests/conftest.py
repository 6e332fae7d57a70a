import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from hoard.attributes import Condition, ItemType, Rarity, Size  # noqa: E402
from hoard.core.random import RandomSource  # noqa: E402
from hoard.items.models import CountedRecord  # noqa: E402


class ScriptedRandom:
    """Random source double: rolls always return the top of the range, picks the first element."""

    def __init__(self, quantity=None):
        self.quantity = quantity
        self.rolls = []

    def roll(self, low, high):
        self.rolls.append((low, high))
        return max(low, high - 1)

    def choice(self, seq):
        return list(seq)[0]

    def weighted_choice(self, weights):
        if self.quantity is not None and self.quantity in weights:
            return self.quantity
        return next(k for k, w in weights.items() if w > 0)


@pytest.fixture
def rng():
    return RandomSource(seed=1234)


@pytest.fixture
def scripted():
    return ScriptedRandom()


def make_record(name, size=Size.SMALL, *, label=None, type=ItemType.MISCELLANEOUS,
                quantity=None, capacity=None, count=1):
    return CountedRecord(
        name=name,
        label=label or name,
        type=type,
        size=size,
        rarity=Rarity.AVERAGE,
        condition=Condition.AVERAGE,
        quantity=quantity,
        capacity=capacity,
        count=count,
    )


@pytest.fixture
def record():
    return make_record
