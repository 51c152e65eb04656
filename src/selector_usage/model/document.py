from __future__ import annotations

from typing import Protocol


class DocumentTree(Protocol):
    """A parsed page that can answer selector existence queries."""

    def matches(self, selector: str) -> bool:
        """Return True if at least one node matches *selector*.

        Raises SelectorQueryError when the selector cannot be evaluated.
        """
        ...
