"""Rule model: the closed set of rule shapes, their configuration and run contexts.

Four rule shapes exist, tagged by ``RuleType``:

- ``NamingRule``: ``test``/``evaluate`` over a single class name.
- ``PropertyRule``: ``analyze`` over a class name and its resolved properties.
- ``StructureRule``: ``analyze_element`` once per element.
- ``PageRule``: ``analyze_page`` once per scan.

The runner dispatches on ``rule.type``; each shape exposes exactly the hook
for its kind.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Mapping, Union

from flowlint.model.element import ElementRole
from flowlint.model.parsed_class import ALL_CLASS_KINDS, ClassKind, ParsedClass
from flowlint.model.result import RuleResult, Severity
from flowlint.model.style import StyleInfo

if TYPE_CHECKING:
    from flowlint.model.graph import ElementGraph
    from flowlint.styles.index import PropertyIndex


class RuleType(Enum):
    NAMING = "naming"
    PROPERTY = "property"
    STRUCTURE = "structure"
    PAGE = "page"


class RuleCategory(Enum):
    FORMAT = "format"
    SEMANTICS = "semantics"
    STRUCTURE = "structure"
    COMPOSITION = "composition"
    PERFORMANCE = "performance"
    ACCESSIBILITY = "accessibility"


@dataclass(frozen=True)
class ConfigField:
    """Schema entry for one custom setting of a rule."""

    label: str
    type: str  # string | string[] | number | boolean | enum
    default: Any
    description: str = ""
    options: tuple[str, ...] = ()


@dataclass
class RuleConfiguration:
    """Effective per-rule settings. Defaults come from the rule itself."""

    rule_id: str
    enabled: bool
    severity: Severity
    custom_settings: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ruleId": self.rule_id,
            "enabled": self.enabled,
            "severity": self.severity.value,
            "customSettings": dict(self.custom_settings),
        }


# ---------------------------------------------------------------------------
# Run contexts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NamingContext:
    config: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PropertyContext:
    """Site-wide style data shared by every property rule in one run."""

    all_styles: tuple[StyleInfo, ...]
    index: PropertyIndex
    config: Mapping[str, Any] = field(default_factory=dict)

    @property
    def class_properties(self) -> Mapping[str, list[dict[str, Any]]]:
        return self.index.class_properties

    @property
    def property_to_classes(self) -> Mapping[str, set[str]]:
        return self.index.property_to_classes

    def with_config(self, config: Mapping[str, Any]) -> PropertyContext:
        return PropertyContext(all_styles=self.all_styles, index=self.index, config=config)

    def properties_for(self, class_name: str) -> dict[str, Any]:
        """Return the first site-wide definition of ``class_name``'s properties."""
        return self.index.properties_for(class_name)


@dataclass(frozen=True)
class ElementClass:
    """A class as applied to one element."""

    name: str
    order: int
    kind: ClassKind
    is_combo: bool = False
    combo_index: int | None = None


@dataclass(frozen=True)
class ElementContext:
    """Everything an element-level rule may consult.

    Lookups are optional: a rule that needs one that is missing must return
    no violations rather than guess.
    """

    element_id: str
    classes: tuple[ElementClass, ...]
    config: Mapping[str, Any] = field(default_factory=dict)
    property_context: PropertyContext | None = None
    get_role_for_element: Callable[[str], ElementRole] | None = None
    get_parent_id: Callable[[str], str | None] | None = None
    get_children_ids: Callable[[str], list[str]] | None = None
    get_ancestor_ids: Callable[[str], list[str]] | None = None
    get_tag_name: Callable[[str], str | None] | None = None
    get_class_names_for_element: Callable[[str], list[str]] | None = None
    parse_class: Callable[[str], ParsedClass] | None = None

    @property
    def class_names(self) -> list[str]:
        return [c.name for c in self.classes]

    @property
    def role(self) -> ElementRole:
        if self.get_role_for_element is None:
            return ElementRole.UNKNOWN
        return self.get_role_for_element(self.element_id)

    def properties_for(self, class_name: str) -> dict[str, Any]:
        if self.property_context is None:
            return {}
        return self.property_context.properties_for(class_name)


@dataclass(frozen=True)
class PageContext:
    """Whole-page view given to page rules."""

    roles_by_element: Mapping[str, ElementRole]
    graph: ElementGraph | None = None
    class_names_by_element: Mapping[str, list[str]] = field(default_factory=dict)
    config: Mapping[str, Any] = field(default_factory=dict)

    def role_for(self, element_id: str) -> ElementRole:
        return self.roles_by_element.get(element_id, ElementRole.UNKNOWN)

    def elements_with_role(self, role: ElementRole) -> list[str]:
        return [eid for eid, r in self.roles_by_element.items() if r is role]

    def tag_name(self, element_id: str) -> str | None:
        if self.graph is None:
            return None
        return self.graph.tag_name(element_id)


# ---------------------------------------------------------------------------
# Rule shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class BaseRule:
    id: str
    name: str
    description: str = ""
    severity: Severity = Severity.ERROR
    enabled: bool = True
    category: RuleCategory = RuleCategory.FORMAT
    target_class_kinds: frozenset[ClassKind] = ALL_CLASS_KINDS
    example: str | None = None
    config_schema: Mapping[str, ConfigField] = field(default_factory=dict, hash=False)

    type: ClassVar[RuleType]

    def applies_to(self, kind: ClassKind) -> bool:
        return kind in self.target_class_kinds

    def default_settings(self) -> dict[str, Any]:
        return {key: copy.deepcopy(f.default) for key, f in self.config_schema.items()}

    def result(self, message: str, **kwargs: Any) -> RuleResult:
        """Build a RuleResult attributed to this rule."""
        kwargs.setdefault("example", self.example)
        return RuleResult(rule_id=self.id, name=self.name, message=message, **kwargs)


@dataclass(frozen=True, kw_only=True)
class NamingRule(BaseRule):
    """``test`` is the cheap predicate; ``evaluate`` builds the violation.

    When ``evaluate`` is omitted, a failing ``test`` yields a violation
    carrying the rule description.
    """

    type: ClassVar[RuleType] = RuleType.NAMING
    test: Callable[[str], bool]
    evaluate: Callable[[str, NamingContext], RuleResult | None] | None = None


@dataclass(frozen=True, kw_only=True)
class PropertyRule(BaseRule):
    type: ClassVar[RuleType] = RuleType.PROPERTY
    analyze: Callable[[str, Mapping[str, Any], PropertyContext], list[RuleResult]]


@dataclass(frozen=True, kw_only=True)
class StructureRule(BaseRule):
    type: ClassVar[RuleType] = RuleType.STRUCTURE
    category: RuleCategory = RuleCategory.STRUCTURE
    analyze_element: Callable[[ElementContext], list[RuleResult]]


@dataclass(frozen=True, kw_only=True)
class PageRule(BaseRule):
    type: ClassVar[RuleType] = RuleType.PAGE
    category: RuleCategory = RuleCategory.STRUCTURE
    analyze_page: Callable[[PageContext], list[RuleResult]]


Rule = Union[NamingRule, PropertyRule, StructureRule, PageRule]
