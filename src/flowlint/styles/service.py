"""Style acquisition from the host."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any, Iterable

from flowlint.adapters.base import ElementHandle, Host, StyleHandle
from flowlint.grammar.lumos import LUMOS_COMBO_PATTERN
from flowlint.model.style import StyleInfo
from flowlint.styles.cache import StyleCache

logger = logging.getLogger("flowlint.styles")

PROPERTY_OPTIONS = {"breakpoint": "main"}


class StyleService:
    """Reads style names, combo flags and properties through the host API.

    Per-style failures degrade (empty name or properties) rather than
    failing the whole fetch.
    """

    def __init__(
        self,
        cache: StyleCache | None = None,
        combo_pattern: re.Pattern[str] = LUMOS_COMBO_PATTERN,
    ) -> None:
        self.cache = cache or StyleCache()
        self._combo_pattern = combo_pattern

    async def fetch_all_styles(self, host: Host) -> list[StyleInfo]:
        """All named site styles in catalogue order, shared across scans."""
        return await self.cache.get_or_fetch(lambda: self._load_all(host))

    async def _load_all(self, host: Host) -> list[StyleInfo]:
        handles = await host.get_all_styles()
        loaded = await asyncio.gather(*(self._read(h) for h in handles))
        named = [s for s in loaded if s.name]
        logger.debug("Loaded %d named styles out of %d", len(named), len(handles))
        return [_with_order(s, i) for i, s in enumerate(named)]

    async def applied_styles(self, element: ElementHandle) -> list[StyleInfo]:
        """Styles applied to ``element`` in applied order, de-duplicated by id."""
        try:
            handles = await element.get_styles()
        except Exception:
            logger.warning("Could not read styles of element %s", element.id, exc_info=True)
            return []

        seen: set[str] = set()
        unique: list[StyleHandle] = []
        for handle in handles or ():
            if handle.id and handle.id not in seen:
                seen.add(handle.id)
                unique.append(handle)
        loaded = await asyncio.gather(*(self._read(h) for h in unique))
        named = [s for s in loaded if s.name]
        return [_with_order(s, i) for i, s in enumerate(named)]

    async def _read(self, handle: StyleHandle) -> StyleInfo:
        try:
            name = ((await handle.get_name()) or "").strip()
        except Exception:
            logger.debug("Could not read name of style %s", handle.id, exc_info=True)
            return StyleInfo(id=handle.id, name="")

        is_combo, source = await self._combo_flag(handle, name)
        properties: dict[str, Any] = {}
        try:
            properties = dict(await handle.get_properties(PROPERTY_OPTIONS) or {})
        except Exception:
            logger.debug("Could not read properties of style %s", name, exc_info=True)
        return StyleInfo(
            id=handle.id,
            name=name,
            properties=properties,
            is_combo=is_combo,
            detection_source=source,
        )

    async def _combo_flag(self, handle: StyleHandle, name: str) -> tuple[bool, str]:
        is_combo_class = getattr(handle, "is_combo_class", None)
        if is_combo_class is not None:
            try:
                return bool(await is_combo_class()), "api"
            except Exception:
                logger.debug("is_combo_class failed for %s", name, exc_info=True)
        return bool(self._combo_pattern.match(name)), "heuristic"


def _with_order(style: StyleInfo, order: int) -> StyleInfo:
    return StyleInfo(
        id=style.id,
        name=style.name,
        properties=style.properties,
        order=order,
        is_combo=style.is_combo,
        detection_source=style.detection_source,
    )


def styles_by_name(styles: Iterable[StyleInfo]) -> dict[str, StyleInfo]:
    """First definition of each class name."""
    by_name: dict[str, StyleInfo] = {}
    for style in styles:
        by_name.setdefault(style.name, style)
    return by_name
