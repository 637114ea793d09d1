"""Exception hierarchy for pyskip."""
from __future__ import annotations

__all__ = ["SkipListError", "LevelOutOfRangeError"]


class SkipListError(Exception):
    """Base exception for all skip-list errors."""
    pass


class LevelOutOfRangeError(SkipListError, IndexError):
    """Raised when a level-indexed read asks for a level the list does not have."""

    def __init__(self, level: int, max_level: int) -> None:
        self.level = level
        self.max_level = max_level
        super().__init__(f"level {level} out of range {max_level}")
