"""Scan input: one consistent snapshot of the page read from the host."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from flowlint.adapters.base import ElementHandle, Host
from flowlint.engine.third_party import split_third_party
from flowlint.errors import HostError
from flowlint.model.element import ElementSnapshot
from flowlint.model.graph import ElementGraph
from flowlint.model.style import StyleInfo
from flowlint.styles.service import StyleService

logger = logging.getLogger("flowlint.engine")


@dataclass
class ScanInput:
    """Everything a scan needs, fetched once up front.

    ``applied_styles`` maps element id to the styles applied to it, already
    filtered of third-party classes.
    """

    elements: list[ElementSnapshot]
    graph: ElementGraph
    applied_styles: dict[str, list[StyleInfo]]
    all_styles: list[StyleInfo]
    ignored_class_names: list[str] = field(default_factory=list)

    def combo_flags(self) -> dict[str, dict[str, bool]]:
        return {
            eid: {s.name: s.is_combo for s in styles}
            for eid, styles in self.applied_styles.items()
        }

    def class_names(self) -> list[str]:
        """Observed class names, de-duplicated in first-seen order."""
        seen: dict[str, None] = {}
        for el in self.elements:
            for name in el.classes:
                seen.setdefault(name, None)
        return list(seen)


async def _parent_map(handles: list[ElementHandle]) -> dict[str, str | None]:
    parents: dict[str, str | None] = {h.id: None for h in handles}
    processed: set[str] = set()
    for handle in handles:
        if handle.id in processed:
            continue
        processed.add(handle.id)
        try:
            children = await handle.get_children()
        except Exception:
            logger.debug("Could not read children of %s", handle.id, exc_info=True)
            continue
        for child in children or ():
            if parents.get(child.id) is None and child.id != handle.id:
                parents[child.id] = handle.id
    return parents


async def _tag_name(handle: ElementHandle) -> str | None:
    try:
        return await handle.get_tag_name()
    except Exception:
        logger.debug("Could not read tag of %s", handle.id, exc_info=True)
        return None


async def build_scan_input(
    host: Host,
    styles: StyleService,
    *,
    ignore_third_party: bool = True,
) -> ScanInput:
    """Read elements, applied styles and the style catalogue from ``host``."""
    try:
        handles = list(await host.get_all_elements())
    except Exception as exc:
        raise HostError(f"Could not fetch page elements: {exc}", cause=exc) from exc

    parents = await _parent_map(handles)
    tags = await asyncio.gather(*(_tag_name(h) for h in handles))
    applied = await asyncio.gather(*(styles.applied_styles(h) for h in handles))
    all_styles = await styles.fetch_all_styles(host)

    children: dict[str, list[str]] = {h.id: [] for h in handles}
    for child_id, parent_id in parents.items():
        if parent_id is not None and parent_id in children:
            children[parent_id].append(child_id)

    elements: list[ElementSnapshot] = []
    applied_styles: dict[str, list[StyleInfo]] = {}
    ignored: dict[str, None] = {}
    for handle, tag, element_styles in zip(handles, tags, applied):
        names = [s.name for s in element_styles]
        if ignore_third_party:
            kept, dropped = split_third_party(names)
            for name in dropped:
                ignored.setdefault(name, None)
            element_styles = [s for s in element_styles if s.name in kept]
        applied_styles[handle.id] = element_styles
        elements.append(
            ElementSnapshot(
                id=handle.id,
                tag_name=tag,
                classes=tuple(s.name for s in element_styles),
                parent_id=parents.get(handle.id),
                children_ids=frozenset(children.get(handle.id, ())),
            )
        )

    graph = ElementGraph(
        [el.id for el in elements],
        {el.id: el.parent_id for el in elements},
        tags={el.id: el.tag_name for el in elements},
    )
    logger.debug(
        "Scan input: %d elements, %d site styles, %d ignored classes",
        len(elements),
        len(all_styles),
        len(ignored),
    )
    return ScanInput(
        elements=elements,
        graph=graph,
        applied_styles=applied_styles,
        all_styles=all_styles,
        ignored_class_names=list(ignored),
    )
