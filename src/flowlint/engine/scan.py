"""Page and element scans over a host."""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Protocol

from flowlint.adapters.base import ElementHandle, Host
from flowlint.engine.context import ScanInput, build_scan_input
from flowlint.engine.runner import RuleRunner
from flowlint.events.bus import EventBus
from flowlint.events.types import ScanCompleted, ScanStarted
from flowlint.model.element import ElementRole
from flowlint.model.preset import DetectionContext, Preset, RoleDetectionConfig
from flowlint.model.result import RuleResult, Severity
from flowlint.registry.registry import RuleRegistry
from flowlint.roles.classifier import RoleClassifier
from flowlint.styles.service import StyleService

logger = logging.getLogger("flowlint.engine")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def _count(violations: list[RuleResult], severity: Severity) -> int:
    return sum(1 for v in violations if v.severity is severity)


@dataclass
class PageScanResult:
    preset_id: str
    violations: list[RuleResult] = field(default_factory=list)
    roles: dict[str, ElementRole] = field(default_factory=dict)
    role_histogram: dict[ElementRole, int] = field(default_factory=dict)
    class_names: list[str] = field(default_factory=list)
    ignored_class_names: list[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return _count(self.violations, Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return _count(self.violations, Severity.WARNING)

    @property
    def suggestion_count(self) -> int:
        return _count(self.violations, Severity.SUGGESTION)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "presetId": self.preset_id,
            "violations": [v.to_dict() for v in self.violations],
            "roles": {eid: role.value for eid, role in self.roles.items()},
            "roleHistogram": {role.value: n for role, n in self.role_histogram.items()},
            "classNames": list(self.class_names),
            "ignoredClassNames": list(self.ignored_class_names),
        }


@dataclass
class ElementScanResult(PageScanResult):
    element_id: str = ""
    sequence: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["elementId"] = self.element_id
        if self.sequence is not None:
            data["sequence"] = self.sequence
        return data


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


class Scanner:
    """Binds one preset and registry to the scan operations.

    A Scanner never changes after construction; switching preset or mode
    means building a new one.
    """

    def __init__(
        self,
        preset: Preset,
        registry: RuleRegistry,
        styles: StyleService,
        *,
        bus: EventBus | None = None,
        role_threshold: float | None = None,
        ignore_third_party: bool = True,
    ) -> None:
        self.preset = preset
        self.registry = registry
        self.styles = styles
        self._bus = bus
        self._ignore_third_party = ignore_third_party
        config = preset.role_detection_config
        if role_threshold is not None:
            config = RoleDetectionConfig(
                threshold=role_threshold, fallback_role=config.fallback_role
            )
        self.classifier = RoleClassifier(preset.role_detectors, config)
        self.runner = RuleRunner(registry, preset.grammar, bus=bus)

    def _emit(self, event: Any) -> None:
        if self._bus is not None:
            self._bus.emit(event)

    def classify(self, scan: ScanInput) -> dict[str, ElementRole]:
        context = DetectionContext(
            all_elements=scan.elements,
            style_info=scan.applied_styles,
            grammar=self.preset.grammar,
            graph=scan.graph,
        )
        return self.classifier.classify_all(context)

    async def load(self, host: Host) -> ScanInput:
        return await build_scan_input(
            host, self.styles, ignore_third_party=self._ignore_third_party
        )

    async def scan_page(self, host: Host) -> PageScanResult:
        self._emit(ScanStarted(scope="page", preset_id=self.preset.id))
        scan = await self.load(host)
        roles = self.classify(scan)
        violations = self.runner.run(
            scan.elements,
            roles=roles,
            graph=scan.graph,
            all_styles=scan.all_styles,
            combo_flags=scan.combo_flags(),
        )
        result = PageScanResult(
            preset_id=self.preset.id,
            violations=violations,
            roles=roles,
            role_histogram=dict(Counter(roles.values())),
            class_names=scan.class_names(),
            ignored_class_names=scan.ignored_class_names,
        )
        logger.info(
            "Page scan (%s): %d elements, %d violations",
            self.preset.id,
            len(scan.elements),
            len(violations),
        )
        self._emit(
            ScanCompleted(
                scope="page",
                preset_id=self.preset.id,
                violation_count=len(violations),
                element_count=len(scan.elements),
            )
        )
        return result

    async def scan_element(
        self, host: Host, element_id: str, *, structural: bool = False
    ) -> ElementScanResult:
        """Scan one element; with ``structural`` also its descendants.

        Roles are classified over the whole page. Page-level rules are
        skipped.
        """
        self._emit(ScanStarted(scope="element", preset_id=self.preset.id, element_id=element_id))
        scan = await self.load(host)
        if element_id not in scan.graph:
            raise KeyError(f"Unknown element: {element_id}")
        roles = self.classify(scan)

        target_ids = [element_id]
        if structural:
            target_ids.extend(scan.graph.descendant_ids(element_id))
        violations = self.runner.run(
            scan.elements,
            roles=roles,
            graph=scan.graph,
            all_styles=scan.all_styles,
            combo_flags=scan.combo_flags(),
            target_ids=set(target_ids),
            include_page_rules=False,
        )
        scoped_roles = {eid: roles[eid] for eid in target_ids}
        names: dict[str, None] = {}
        for el in scan.elements:
            if el.id in scoped_roles:
                for name in el.classes:
                    names.setdefault(name, None)
        result = ElementScanResult(
            preset_id=self.preset.id,
            element_id=element_id,
            violations=violations,
            roles=scoped_roles,
            role_histogram=dict(Counter(scoped_roles.values())),
            class_names=list(names),
            ignored_class_names=scan.ignored_class_names,
        )
        self._emit(
            ScanCompleted(
                scope="element",
                preset_id=self.preset.id,
                violation_count=len(violations),
                element_count=len(target_ids),
                element_id=element_id,
            )
        )
        return result


# ---------------------------------------------------------------------------
# Selection watching
# ---------------------------------------------------------------------------


class ElementScanner(Protocol):
    async def scan_element(
        self, host: Host, element_id: str, *, structural: bool = False
    ) -> ElementScanResult: ...


def watch_selection(
    host: Host,
    linter: ElementScanner,
    callback: Callable[[ElementScanResult], Awaitable[None] | None],
    *,
    structural: bool = False,
) -> Callable[[], None]:
    """Scan every non-null selection and pass results to ``callback``.

    Each result carries a sequence number that increases with every
    selection; a callback holding a higher number can drop older results.
    Must be called with a running event loop. Returns an unsubscribe
    function.
    """
    loop = asyncio.get_running_loop()
    counter = itertools.count(1)
    pending: set[asyncio.Task[None]] = set()

    async def run(handle: ElementHandle, sequence: int) -> None:
        try:
            result = await linter.scan_element(host, handle.id, structural=structural)
        except Exception:
            logger.error("Selection scan of %s failed", handle.id, exc_info=True)
            return
        result.sequence = sequence
        try:
            outcome = callback(result)
            if asyncio.iscoroutine(outcome):
                await outcome
        except Exception:
            logger.error("Selection callback for %s failed", handle.id, exc_info=True)

    def on_selection(handle: ElementHandle | None) -> None:
        if handle is None:
            return
        task = loop.create_task(run(handle, next(counter)))
        pending.add(task)
        task.add_done_callback(pending.discard)

    return host.subscribe_selection(on_selection)
