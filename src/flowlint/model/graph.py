"""Element graph: parent/children/ancestor lookups over a page snapshot."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Mapping

from flowlint.model.element import ElementSnapshot


class ElementGraph:
    """Structural lookups built once per scan.

    Parent and children lookups are O(1) after the single linear build pass
    in ``__init__``. Children keep the order in which they appear in the
    parent map, which follows element iteration order.
    """

    def __init__(
        self,
        element_ids: Iterable[str],
        parent_by_child: Mapping[str, str | None],
        *,
        tags: Mapping[str, str | None] | None = None,
    ) -> None:
        self._parent_by_child: dict[str, str | None] = dict(parent_by_child)
        self._children: dict[str, list[str]] = {}
        self._tags: dict[str, str | None] = dict(tags or {})
        for eid in element_ids:
            self._children.setdefault(eid, [])
            self._parent_by_child.setdefault(eid, None)
        for child_id, parent_id in self._parent_by_child.items():
            if parent_id:
                self._children.setdefault(parent_id, []).append(child_id)

    @classmethod
    def from_snapshots(cls, elements: Iterable[ElementSnapshot]) -> ElementGraph:
        """Build a graph from snapshots, using each snapshot's ``parent_id``."""
        elements = list(elements)
        return cls(
            [e.id for e in elements],
            {e.id: e.parent_id for e in elements},
            tags={e.id: e.tag_name for e in elements},
        )

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._parent_by_child

    @property
    def element_ids(self) -> list[str]:
        return list(self._parent_by_child)

    def parent_id(self, element_id: str) -> str | None:
        """Return the parent id, or None for roots and unknown ids."""
        return self._parent_by_child.get(element_id)

    def children_ids(self, element_id: str) -> list[str]:
        """Return direct children in insertion order."""
        return list(self._children.get(element_id, ()))

    def tag_name(self, element_id: str) -> str | None:
        return self._tags.get(element_id)

    def ancestor_ids(self, element_id: str) -> list[str]:
        """Return ancestors nearest-first.

        Stops at the first missing parent, or when an id would repeat. A
        cycle therefore yields the truncated chain instead of looping.
        """
        out: list[str] = []
        seen = {element_id}
        current = self.parent_id(element_id)
        while current and current not in seen:
            out.append(current)
            seen.add(current)
            current = self.parent_id(current)
        return out

    def descendant_ids(self, element_id: str) -> list[str]:
        """Return all descendants in breadth-first order (cycle safe)."""
        out: list[str] = []
        visited = {element_id}
        queue = deque(self.children_ids(element_id))
        while queue:
            nid = queue.popleft()
            if nid in visited:
                continue
            visited.add(nid)
            out.append(nid)
            queue.extend(self.children_ids(nid))
        return out
