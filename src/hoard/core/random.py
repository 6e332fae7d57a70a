from __future__ import annotations

import logging
import random
from bisect import bisect_right
from dataclasses import dataclass
from itertools import accumulate
from typing import Any, Dict, Iterable

logger = logging.getLogger(__name__)


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - keep every generator off the global random state
    - support optional deterministic seeding for tests
    - provide the roll / pick / weighted pick helpers the pipeline needs
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def roll(self, low: int, high: int) -> int:
        """Return a random integer N such that low <= N < high.

        A range with ``high <= low`` is degenerate and always yields ``low``.
        """
        if high <= low:
            return low
        return self._rng.randrange(low, high)

    def choice(self, seq: Iterable[Any]) -> Any:
        seq_list = list(seq)
        if not seq_list:
            raise ValueError("RandomSource.choice() received an empty sequence")
        idx = self._rng.randrange(0, len(seq_list))
        return seq_list[idx]

    def weighted_choice(self, weights: Dict[Any, float]) -> Any:
        """Draw a key from a weight table such as ``rarity_weights``.

        Zero-weight entries can never be drawn, so a config can switch a
        quantity, rarity or condition off by weighting it 0. Negative weights,
        an empty table or a table of only zeros raise ValueError.
        """
        live = [(key, w) for key, w in weights.items() if w != 0]
        bad = [key for key, w in live if w < 0]
        if bad:
            raise ValueError(f"Negative weight for {bad[0]!r} in weight table")
        if not live:
            raise ValueError("Weight table has no positive weights")

        keys = [key for key, _ in live]
        bounds = list(accumulate(w for _, w in live))
        point = self._rng.random() * bounds[-1]
        return keys[min(bisect_right(bounds, point), len(keys) - 1)]


__all__ = ["RandomSource"]
