"""Ordered selector sets and the cross-view usage accumulator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class SelectorSet:
    """Insert-only set of selector strings that remembers first-seen order."""

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._items: dict[str, None] = {}
        for selector in initial:
            self.add(selector)

    def add(self, selector: str) -> bool:
        """Add *selector*; return False if it was already present."""
        if selector in self._items:
            return False
        self._items[selector] = None
        return True

    def as_list(self) -> list[str]:
        return list(self._items)

    def __contains__(self, selector: object) -> bool:
        return selector in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._items)})"


class UsageAccumulator(SelectorSet):
    """Union of the selectors matched in any view processed so far.

    Only ever grows; feeding the same used list twice is a no-op.
    """

    def fold(self, used: Iterable[str]) -> int:
        """Merge one view's used selectors; return how many were new."""
        return sum(1 for selector in used if self.add(selector))
