"""Bidirectional map with unique keys on both sides."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, TypeVar

L = TypeVar("L", bound=Hashable)
R = TypeVar("R", bound=Hashable)


class TwoWayMap(Generic[L, R]):
    """Associates left and right values one to one, with lookup both ways."""

    def __init__(self, pairs: Iterable[tuple[L, R]] = ()) -> None:
        self._left_to_right: dict[L, R] = {}
        self._right_to_left: dict[R, L] = {}
        self.insert_all(pairs)

    def insert(self, left: L, right: R) -> None:
        """Insert a pair. Neither side may be present already."""
        if left in self._left_to_right:
            raise ValueError(f"left value already present: {left!r}")
        if right in self._right_to_left:
            raise ValueError(f"right value already present: {right!r}")
        self._left_to_right[left] = right
        self._right_to_left[right] = left

    def insert_all(self, pairs: Iterable[tuple[L, R]]) -> None:
        """Insert every (left, right) pair in turn."""
        for left, right in pairs:
            self.insert(left, right)

    def contains_left(self, left: L) -> bool:
        return left in self._left_to_right

    def contains_right(self, right: R) -> bool:
        return right in self._right_to_left

    def get_right(self, left: L) -> R:
        """Return the right value paired with ``left``; KeyError if absent."""
        return self._left_to_right[left]

    def get_left(self, right: R) -> L:
        """Return the left value paired with ``right``; KeyError if absent."""
        return self._right_to_left[right]

    def __len__(self) -> int:
        return len(self._left_to_right)