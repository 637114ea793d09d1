"""Skip-list backed ordered mapping.

Every node sits on level 0; each level above holds a randomly thinned subset
of the level below it, so a lookup can skip ahead on the sparse upper levels
before dropping down.

Complexities (average case):
    • find     – O(log n)
    • insert   – O(log n)
    • remove   – O(log n)
    • iterate  – O(n)

The maximum level only ever grows. Removing the last node of the top level
leaves that level in place, empty.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, Optional, TextIO, TypeVar, Union

from .errors import LevelOutOfRangeError
from .levels import LevelGenerator

__all__ = ["Node", "SkipList"]

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

_END_MARKER = "nil"


class Node(Generic[K, V]):
    """Key/value pair with one forward link per level it occupies."""

    __slots__ = ("_key", "value", "forward")

    def __init__(self, key: Optional[K], value: Optional[V], level: int):
        self._key = key
        self.value = value
        self.forward: list[Optional[Node[K, V]]] = [None] * (level + 1)

    @property
    def key(self) -> K:
        return self._key  # type: ignore[return-value]

    @property
    def level(self) -> int:
        """Highest level this node is linked on."""
        return len(self.forward) - 1

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self._key!r}:{self.value!r}>"


class SkipList(Generic[K, V]):
    """Ordered mapping with upsert, point lookup, removal and per-level scans.

    Parameters
    ----------
    items:
        Optional mapping, or iterable of ``(key, value)`` pairs, inserted in
        iteration order. Later duplicates overwrite earlier ones.
    seed:
        Seed for a fresh :class:`LevelGenerator`. Use it to make the level
        structure reproducible.
    generator:
        An existing generator to own instead of creating one. Cannot be
        combined with ``seed``.

    Not thread-safe: share an instance across threads only behind a lock.
    """

    def __init__(
        self,
        items: Union[Mapping[K, V], Iterable[tuple[K, V]], None] = None,
        *,
        seed: Optional[int] = None,
        generator: Optional[LevelGenerator] = None,
    ) -> None:
        if generator is not None and seed is not None:
            raise ValueError("pass either seed or generator, not both")
        self._generator = generator if generator is not None else LevelGenerator(seed)
        self._head: Node[K, V] = Node(None, None, 0)
        self._level = -1
        self._size = 0
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                self.insert(key, value)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._size

    @property
    def level(self) -> int:
        """Current maximum level, ``-1`` while nothing has been inserted."""
        return self._level

    @property
    def generator(self) -> LevelGenerator:
        return self._generator

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SkipList(size={self._size}, level={self._level})"

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _predecessors(self, key: K) -> list[Node[K, V]]:
        """Return ``update`` where ``update[i]`` is the last node at level ``i`` with key < ``key``."""
        update: list[Node[K, V]] = [self._head] * (self._level + 1)
        x = self._head
        for i in reversed(range(self._level + 1)):
            while (nxt := x.forward[i]) and nxt.key < key:  # type: ignore[operator]
                x = nxt
            update[i] = x
        return update

    def find(self, key: K) -> Optional[Node[K, V]]:
        """Return the node holding ``key``, or ``None``.

        The returned node is live: assigning to its ``value`` updates the list.
        """
        if self._level < 0:
            return None
        x = self._predecessors(key)[0].forward[0]
        if x and x.key == key:
            return x
        return None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node = self.find(key)
        return default if node is None else node.value

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def insert(self, key: K, value: V) -> Node[K, V]:
        """Insert ``key`` or overwrite its value if already present."""
        new_level = self._generator.next_level()
        if new_level > self._level:
            self._grow_head(new_level)

        update = self._predecessors(key)
        x = update[0].forward[0]
        if x and x.key == key:
            x.value = value
            return x

        node: Node[K, V] = Node(key, value, new_level)
        for i in range(new_level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node
        self._size += 1
        return node

    def remove(self, key: K) -> bool:
        """Unlink ``key`` from every level it occupies.

        Returns ``False`` and changes nothing when ``key`` is absent.
        """
        if self._level < 0:
            return False
        update = self._predecessors(key)
        target = update[0].forward[0]
        if not target or target.key != key:
            return False
        for i in range(target.level + 1):
            if update[i].forward[i] is target:
                update[i].forward[i] = target.forward[i]
        self._size -= 1
        return True

    def _grow_head(self, new_level: int) -> None:
        self._head.forward.extend([None] * (new_level + 1 - len(self._head.forward)))
        logger.debug("max level raised from %d to %d", self._level, new_level)
        self._level = new_level

    # ------------------------------------------------------------------
    # Ordered enumeration
    # ------------------------------------------------------------------
    def _check_level(self, level: int) -> None:
        if not 0 <= level <= self._level:
            raise LevelOutOfRangeError(level, self._level)

    def _walk(self, level: int) -> Iterator[Node[K, V]]:
        x = self._head.forward[level]
        while x is not None:
            yield x
            x = x.forward[level]

    def keys(self, level: int = 0) -> list[K]:
        self._check_level(level)
        return [node.key for node in self._walk(level)]

    def values(self, level: int = 0) -> list[V]:
        self._check_level(level)
        return [node.value for node in self._walk(level)]  # type: ignore[misc]

    def to_dict(self, level: int = 0) -> dict[K, V]:
        self._check_level(level)
        return {node.key: node.value for node in self._walk(level)}  # type: ignore[misc]

    def __iter__(self) -> Iterator[tuple[K, V]]:
        for node in self._walk(0):
            yield node.key, node.value  # type: ignore[misc]

    def at(self, index: int, level: int = 0) -> Node[K, V]:
        """Return the ``index``-th node (0-based) linked on ``level``.

        Walks the level from the head, so the cost is O(index). Negative
        indices are rejected rather than counted from the end.
        """
        self._check_level(level)
        if index < 0:
            raise IndexError(f"index {index} out of range")
        for i, node in enumerate(self._walk(level)):
            if i == index:
                return node
        raise IndexError(f"index {index} out of range")

    def level_counts(self) -> list[int]:
        """Number of nodes linked on each level, bottom first."""
        return [sum(1 for _ in self._walk(i)) for i in range(self._level + 1)]

    def show(self, file: Optional[TextIO] = None) -> None:
        """Print level-0 values as ``a->b->nil`` (debugging aid)."""
        parts = [str(node.value) for node in self._walk(0)]
        parts.append(_END_MARKER)
        print("->".join(parts), file=file)
