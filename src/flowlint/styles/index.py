"""Property index over the site-wide style catalogue.

Built once per scan and shared by every property rule in that scan.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from flowlint.model.style import StyleInfo


def property_key(name: str, value: Any) -> str:
    """``name:json(value)``; two classes share a property when keys match."""
    return f"{name}:{json.dumps(value, sort_keys=True, default=str)}"


def _signature(properties: Mapping[str, Any]) -> str:
    return json.dumps(properties, sort_keys=True, default=str)


@dataclass
class DuplicateInfo:
    class_name: str
    duplicate_properties: dict[str, list[str]] = field(default_factory=dict)
    is_exact_match: bool = False
    single_property: tuple[str, str, list[str]] | None = None


class PropertyIndex:
    """Lookups from classes to properties and from properties to classes.

    ``class_properties`` and ``property_to_classes`` cover utility classes
    only; ``identical_classes`` compares full property sets of every class.
    """

    def __init__(self, styles: Iterable[StyleInfo], utility_prefix: str = "u-") -> None:
        self.class_properties: dict[str, list[dict[str, Any]]] = {}
        self.property_to_classes: dict[str, set[str]] = {}
        self._first_properties: dict[str, dict[str, Any]] = {}
        self._by_signature: dict[str, list[str]] = {}

        for style in styles:
            self._first_properties.setdefault(style.name, dict(style.properties))
            if style.properties:
                names = self._by_signature.setdefault(_signature(style.properties), [])
                if style.name not in names:
                    names.append(style.name)
            if style.name.startswith(utility_prefix):
                self.class_properties.setdefault(style.name, []).append(dict(style.properties))

        for class_name, entries in self.class_properties.items():
            for props in entries:
                for prop, value in props.items():
                    key = property_key(prop, value)
                    self.property_to_classes.setdefault(key, set()).add(class_name)

    def properties_for(self, class_name: str) -> dict[str, Any]:
        return dict(self._first_properties.get(class_name, {}))

    def identical_classes(self, class_name: str, properties: Mapping[str, Any]) -> list[str]:
        """Other classes whose full property set equals ``properties``."""
        if not properties:
            return []
        names = self._by_signature.get(_signature(properties), [])
        return [n for n in names if n != class_name]

    def analyze_duplicates(
        self, class_name: str, properties: Mapping[str, Any]
    ) -> DuplicateInfo | None:
        """Utility classes sharing any property value with ``class_name``."""
        info = DuplicateInfo(class_name=class_name)
        for prop, value in properties.items():
            key = property_key(prop, value)
            others = sorted(self.property_to_classes.get(key, set()) - {class_name})
            if not others:
                continue
            info.duplicate_properties[key] = others
            if len(properties) == 1:
                shown = value if isinstance(value, str) else json.dumps(value, default=str)
                info.single_property = (prop, shown, others)

        if not info.duplicate_properties:
            return None

        if len(properties) == 1:
            (others,) = info.duplicate_properties.values()
            info.is_exact_match = any(
                len(self.class_properties.get(o, [{}])[0]) == 1 for o in others
            )
        return info
