"""pyskip: an in-memory ordered mapping backed by a skip list.

The package exposes :class:`pyskip.SkipList` together with the node type,
the per-list random level generator and the error hierarchy.
"""

from __future__ import annotations

import logging

__all__ = [
    "SkipList",
    "Node",
    "LevelGenerator",
    "SkipListError",
    "LevelOutOfRangeError",
]

__version__ = "0.1.0"

from .errors import LevelOutOfRangeError, SkipListError
from .levels import LevelGenerator
from .skiplist import Node, SkipList

logging.getLogger(__name__).addHandler(logging.NullHandler())
