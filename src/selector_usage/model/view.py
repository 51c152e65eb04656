"""View tree model: the nested structure served by the sitemap endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ViewNode:
    """One node of the view tree; both the id and the children are optional."""

    id: str = ""
    views: tuple[ViewNode, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ViewNode:
        """Build a tree from decoded sitemap JSON.

        Missing keys, ``null`` values and children that are not objects are
        tolerated; they simply contribute nothing.
        """
        raw_id = data.get("id")
        children = data.get("views") or []
        return cls(
            id=raw_id if isinstance(raw_id, str) else "",
            views=tuple(cls.from_dict(child) for child in children if isinstance(child, Mapping)),
        )
