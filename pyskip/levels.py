"""Random level generator.

Each skip list owns one generator so two lists never share random state.
A fixed seed makes the level structure reproducible for tests.
"""
from __future__ import annotations

import logging
import random
import time
from typing import Optional

__all__ = ["LevelGenerator"]

logger = logging.getLogger(__name__)

_P = 0.5  # probability of promoting a node one level higher


class LevelGenerator:
    """Draws node levels from a geometric distribution, P(L) = (1/2)^(L+1)."""

    __slots__ = ("seed", "_random")

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = time.monotonic_ns()
        self.seed = seed
        self._random = random.Random(seed)
        logger.debug("level generator seeded with %d", seed)

    def next_level(self) -> int:
        lvl = 0
        while self._random.random() < _P:
            lvl += 1
        return lvl

    def __repr__(self) -> str:  # pragma: no cover
        return f"LevelGenerator(seed={self.seed!r})"
