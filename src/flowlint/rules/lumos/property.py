"""Lumos property rules backed by the shared property index."""

from __future__ import annotations

from typing import Any, Mapping

from flowlint.model.parsed_class import ClassKind
from flowlint.model.result import RuleResult, Severity
from flowlint.model.rule import PropertyContext, PropertyRule, RuleCategory

EXACT_DUPLICATE_ID = "lumos:property:exact-duplicate"
UTILITY_DUPLICATE_ID = "lumos:property:utility-duplicate-properties"


def create_exact_duplicate_rule() -> PropertyRule:
    rule: PropertyRule

    def analyze(
        name: str, properties: Mapping[str, Any], context: PropertyContext
    ) -> list[RuleResult]:
        twins = context.index.identical_classes(name, properties)
        if not twins:
            return []
        listed = ", ".join(f'"{t}"' for t in twins)
        return [
            rule.result(
                f'Class "{name}" has exactly the same properties as {listed}. '
                "Reuse the existing class instead.",
                class_name=name,
                metadata={"duplicates": twins, "properties": dict(properties)},
            )
        ]

    rule = PropertyRule(
        id=EXACT_DUPLICATE_ID,
        name="Exact Duplicate Class",
        description=(
            "Classes should not be exact duplicates (by their unique properties) "
            "of other classes."
        ),
        severity=Severity.ERROR,
        category=RuleCategory.SEMANTICS,
        target_class_kinds=frozenset({ClassKind.UTILITY, ClassKind.COMBO, ClassKind.CUSTOM}),
        analyze=analyze,
    )
    return rule


def create_utility_duplicate_properties_rule() -> PropertyRule:
    rule: PropertyRule

    def analyze(
        name: str, properties: Mapping[str, Any], context: PropertyContext
    ) -> list[RuleResult]:
        info = context.index.analyze_duplicates(name, properties)
        if info is None:
            return []
        if info.single_property is not None:
            prop, value, others = info.single_property
            message = (
                f'"{prop}: {value}" is also defined by {", ".join(others)}. '
                "Consider consolidating these utilities."
            )
        else:
            shared = sorted({c for cs in info.duplicate_properties.values() for c in cs})
            message = (
                f'Class "{name}" shares {len(info.duplicate_properties)} property '
                f"value(s) with {', '.join(shared)}."
            )
        return [
            rule.result(
                message,
                class_name=name,
                metadata={
                    "duplicateProperties": info.duplicate_properties,
                    "isExactMatch": info.is_exact_match,
                },
            )
        ]

    rule = PropertyRule(
        id=UTILITY_DUPLICATE_ID,
        name="Duplicate Utility Class Properties",
        description="Utility classes should avoid having duplicate properties with other classes.",
        severity=Severity.SUGGESTION,
        enabled=False,
        category=RuleCategory.SEMANTICS,
        target_class_kinds=frozenset({ClassKind.UTILITY}),
        analyze=analyze,
    )
    return rule
