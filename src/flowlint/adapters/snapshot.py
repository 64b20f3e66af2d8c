"""In-memory host backed by a JSON page snapshot.

Snapshot layout::

    {
      "elements": [
        {"id": "e1", "tag": "main", "parent": null, "classes": ["page_main"]},
        ...
      ],
      "styles": [
        {"id": "s1", "name": "page_main", "properties": {}, "combo": false},
        ...
      ]
    }

Classes referenced by an element but missing from ``styles`` get an
implicit style with no properties.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Mapping

from flowlint.adapters.base import SelectionCallback
from flowlint.errors import HostError


class SnapshotStyle:
    def __init__(
        self,
        id: str,
        name: str,
        properties: Mapping[str, Any] | None = None,
        combo: bool | None = None,
    ) -> None:
        self.id = id
        self.name = name
        self._properties = dict(properties or {})
        self._combo = combo
        if combo is not None:
            self.is_combo_class = self._is_combo_class

    async def get_name(self) -> str:
        return self.name

    async def get_properties(self, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return dict(self._properties)

    async def _is_combo_class(self) -> bool:
        return bool(self._combo)


class SnapshotElement:
    def __init__(self, id: str, tag: str | None, styles: list[SnapshotStyle]) -> None:
        self.id = id
        self._tag = tag
        self._styles = styles
        self.children: list[SnapshotElement] = []

    async def get_styles(self) -> list[SnapshotStyle]:
        return list(self._styles)

    async def get_tag_name(self) -> str | None:
        return self._tag

    async def get_children(self) -> list[SnapshotElement]:
        return list(self.children)


class SnapshotHost:
    """Host built from a snapshot dict; selection is driven with ``select``."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        if not isinstance(data, Mapping):
            raise HostError("Snapshot must be a JSON object")
        self._styles: list[SnapshotStyle] = []
        self._styles_by_name: dict[str, SnapshotStyle] = {}
        self._elements: list[SnapshotElement] = []
        self._by_id: dict[str, SnapshotElement] = {}
        self._selection_listeners: list[SelectionCallback] = []
        try:
            self._load(data)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise HostError(f"Malformed snapshot: {exc}", cause=exc) from exc

    @classmethod
    def from_file(cls, path: str | Path) -> SnapshotHost:
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise HostError(f"Could not read snapshot {path}: {exc}", cause=exc) from exc
        return cls(data)

    def _load(self, data: Mapping[str, Any]) -> None:
        for i, raw in enumerate(data.get("styles", [])):
            style = SnapshotStyle(
                id=str(raw.get("id") or f"style-{i}"),
                name=raw["name"],
                properties=raw.get("properties"),
                combo=raw.get("combo"),
            )
            self._styles.append(style)
            self._styles_by_name.setdefault(style.name, style)

        parents: dict[str, str | None] = {}
        for raw in data.get("elements", []):
            element_id = str(raw["id"])
            if element_id in self._by_id:
                raise ValueError(f"duplicate element id {element_id!r}")
            styles = [self._style_for(name) for name in raw.get("classes", [])]
            element = SnapshotElement(element_id, raw.get("tag"), styles)
            self._elements.append(element)
            self._by_id[element_id] = element
            parents[element_id] = raw.get("parent")

        for element_id, parent_id in parents.items():
            if parent_id is None:
                continue
            parent = self._by_id.get(str(parent_id))
            if parent is None:
                raise ValueError(f"element {element_id!r} has unknown parent {parent_id!r}")
            parent.children.append(self._by_id[element_id])

    def _style_for(self, name: str) -> SnapshotStyle:
        style = self._styles_by_name.get(name)
        if style is None:
            style = SnapshotStyle(id=f"implicit-{name}", name=name)
            self._styles.append(style)
            self._styles_by_name[name] = style
        return style

    def element(self, element_id: str) -> SnapshotElement | None:
        return self._by_id.get(element_id)

    async def get_all_elements(self) -> list[SnapshotElement]:
        return list(self._elements)

    async def get_all_styles(self) -> list[SnapshotStyle]:
        return list(self._styles)

    def subscribe_selection(self, callback: SelectionCallback) -> Callable[[], None]:
        self._selection_listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._selection_listeners:
                self._selection_listeners.remove(callback)

        return unsubscribe

    def select(self, element_id: str | None) -> None:
        """Simulate a selection change."""
        element = self._by_id.get(element_id) if element_id is not None else None
        for cb in list(self._selection_listeners):
            cb(element)
