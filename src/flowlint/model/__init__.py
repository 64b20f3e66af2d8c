"""Flowlint model layer -- public type re-exports."""

from flowlint.model.element import ElementRole, ElementSnapshot, RoleDetectionResult
from flowlint.model.graph import ElementGraph
from flowlint.model.parsed_class import ALL_CLASS_KINDS, ClassKind, ParsedClass
from flowlint.model.preset import DetectionContext, Preset, RoleDetectionConfig, RoleDetector
from flowlint.model.result import QuickFix, RuleResult, Severity
from flowlint.model.rule import (
    ConfigField,
    ElementClass,
    ElementContext,
    NamingContext,
    NamingRule,
    PageContext,
    PageRule,
    PropertyContext,
    PropertyRule,
    Rule,
    RuleCategory,
    RuleConfiguration,
    RuleType,
    StructureRule,
)
from flowlint.model.style import StyleInfo

__all__ = [
    # parsed class
    "ClassKind",
    "ALL_CLASS_KINDS",
    "ParsedClass",
    # element
    "ElementRole",
    "ElementSnapshot",
    "RoleDetectionResult",
    "ElementGraph",
    # style
    "StyleInfo",
    # result
    "Severity",
    "QuickFix",
    "RuleResult",
    # rule
    "RuleType",
    "RuleCategory",
    "ConfigField",
    "RuleConfiguration",
    "NamingContext",
    "PropertyContext",
    "ElementClass",
    "ElementContext",
    "PageContext",
    "NamingRule",
    "PropertyRule",
    "StructureRule",
    "PageRule",
    "Rule",
    # preset
    "RoleDetectionConfig",
    "DetectionContext",
    "RoleDetector",
    "Preset",
]
