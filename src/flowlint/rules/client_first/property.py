"""Client-First property rules."""

from __future__ import annotations

import re
from typing import Any, Mapping

from flowlint.model.parsed_class import ClassKind
from flowlint.model.result import RuleResult, Severity
from flowlint.model.rule import PropertyContext, PropertyRule, RuleCategory

PREFER_REM_ID = "cf:property:prefer-rem"

SIZING_PROPERTIES = frozenset(
    {
        "font-size",
        "line-height",
        "letter-spacing",
        "width",
        "height",
        "min-width",
        "min-height",
        "max-width",
        "max-height",
        "padding",
        "padding-top",
        "padding-right",
        "padding-bottom",
        "padding-left",
        "margin",
        "margin-top",
        "margin-right",
        "margin-bottom",
        "margin-left",
        "gap",
        "row-gap",
        "column-gap",
        "top",
        "right",
        "bottom",
        "left",
        "border-radius",
        "border-width",
    }
)

PX_VALUE = re.compile(r"(\d+(?:\.\d+)?)px")
ROOT_FONT_SIZE_PX = 16


def px_to_rem(px: float) -> str:
    rem = round(px / ROOT_FONT_SIZE_PX, 4)
    return f"{rem:g}rem"


def create_prefer_rem_rule() -> PropertyRule:
    rule: PropertyRule

    def analyze(
        name: str, properties: Mapping[str, Any], context: PropertyContext
    ) -> list[RuleResult]:
        results: list[RuleResult] = []
        for prop, value in properties.items():
            if prop not in SIZING_PROPERTIES or not isinstance(value, str):
                continue
            match = PX_VALUE.search(value)
            if match is None:
                continue
            px = float(match.group(1))
            # 1px hairlines stay in px.
            if px <= 1:
                continue
            suggestion = px_to_rem(px)
            results.append(
                rule.result(
                    f'Property "{prop}" uses px ({value}). Consider using rem: {suggestion}.',
                    class_name=name,
                    metadata={
                        "property": prop,
                        "currentValue": value,
                        "suggestedValue": suggestion,
                        "pxValue": px,
                    },
                )
            )
        return results

    rule = PropertyRule(
        id=PREFER_REM_ID,
        name="Client-First: Prefer rem units",
        description="Client-First recommends rem units for all sizing properties.",
        example="font-size: 1rem (not 16px), padding: 1.25rem (not 20px)",
        severity=Severity.SUGGESTION,
        category=RuleCategory.ACCESSIBILITY,
        target_class_kinds=frozenset({ClassKind.CUSTOM, ClassKind.UTILITY, ClassKind.COMBO}),
        analyze=analyze,
    )
    return rule
