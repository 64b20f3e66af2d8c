"""Preset model: a named bundle of grammar, role detectors and rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping, Protocol, Sequence

from flowlint.model.element import ElementRole, ElementSnapshot, RoleDetectionResult
from flowlint.model.parsed_class import ParsedClass
from flowlint.model.rule import Rule
from flowlint.model.style import StyleInfo

if TYPE_CHECKING:
    from flowlint.grammar.base import GrammarAdapter
    from flowlint.model.graph import ElementGraph


@dataclass(frozen=True)
class RoleDetectionConfig:
    threshold: float = 0.6
    fallback_role: ElementRole | None = None

    def __post_init__(self) -> None:
        # Clamp rather than reject; presets may be built from user input.
        object.__setattr__(self, "threshold", min(1.0, max(0.0, float(self.threshold))))


@dataclass(frozen=True)
class DetectionContext:
    """Page-wide inputs available to every role detector."""

    all_elements: Sequence[ElementSnapshot]
    style_info: Mapping[str, Sequence[StyleInfo]]
    grammar: GrammarAdapter
    graph: ElementGraph | None = None
    _by_id: dict[str, ElementSnapshot] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._by_id.update((el.id, el) for el in self.all_elements)

    def element(self, element_id: str) -> ElementSnapshot | None:
        return self._by_id.get(element_id)

    def first_custom(self, element: ElementSnapshot) -> ParsedClass | None:
        """Parse ``element``'s classes and return the first custom one."""
        for name in element.classes:
            parsed = self.grammar.parse(name)
            if parsed.is_custom:
                return parsed
        return None


class RoleDetector(Protocol):
    """Interface every role detector implements."""

    id: str

    def detect(
        self, element: ElementSnapshot, context: DetectionContext
    ) -> RoleDetectionResult | None:
        """Return an opinion about ``element``'s role, or None to abstain."""
        ...


@dataclass(frozen=True)
class Preset:
    """Immutable preset definition.

    Detector order is significant: on equal scores the first-registered
    detector wins.
    """

    id: str
    name: str
    grammar: GrammarAdapter
    role_detectors: tuple[RoleDetector, ...] = ()
    role_detection_config: RoleDetectionConfig = field(default_factory=RoleDetectionConfig)
    rules: tuple[Rule, ...] = ()
    description: str = ""

    def rule_ids(self) -> list[str]:
        return [r.id for r in self.rules]
