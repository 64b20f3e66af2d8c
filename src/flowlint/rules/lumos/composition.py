"""Lumos composition rules: how classes combine on a single element."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Sequence

from flowlint.model.parsed_class import ClassKind
from flowlint.model.result import QuickFix, RuleResult, Severity
from flowlint.model.rule import (
    ConfigField,
    ElementClass,
    ElementContext,
    RuleCategory,
    StructureRule,
)

CLASS_ORDER_ID = "lumos:composition:class-order"
VARIANT_REQUIRES_BASE_ID = "lumos:composition:variant-requires-base"
COMBO_LIMIT_ID = "lumos:composition:combo-limit"

DEFAULT_VARIANT_PREFIXES = ["is_", "is-"]

_UTILITY_NAME = re.compile(r"^u[_-]")
_VARIANT_NAME = re.compile(r"^is[_-]")


def _is_utility(c: ElementClass) -> bool:
    return c.kind is ClassKind.UTILITY or bool(_UTILITY_NAME.match(c.name))


def _has_prefix(name: str, prefixes: Sequence[str]) -> bool:
    return any(name.startswith(p) for p in prefixes)


def _ordered(context: ElementContext) -> list[ElementClass]:
    return sorted(context.classes, key=lambda c: c.order)


# ---------------------------------------------------------------------------
# Class order
# ---------------------------------------------------------------------------


def create_class_order_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        ordered = _ordered(context)
        base: list[str] = []
        variants: list[str] = []
        utilities: list[str] = []
        seen_variant = seen_utility = False
        first: RuleResult | None = None

        for c in ordered:
            if _is_utility(c):
                utilities.append(c.name)
                seen_utility = True
                continue
            if _VARIANT_NAME.match(c.name):
                variants.append(c.name)
                if seen_utility and first is None:
                    first = rule.result(
                        f'Variant class "{c.name}" appears after a utility class. '
                        "Variants must come before utilities.",
                        class_name=c.name,
                        is_combo=c.is_combo,
                        combo_index=c.combo_index,
                    )
                seen_variant = True
                continue
            base.append(c.name)
            if (seen_variant or seen_utility) and first is None:
                phase = "a utility" if seen_utility else "a variant"
                first = rule.result(
                    f'Base class "{c.name}" appears after {phase} class. Base must come first.',
                    class_name=c.name,
                    is_combo=c.is_combo,
                    combo_index=c.combo_index,
                )

        if first is None:
            return []
        current = [c.name for c in ordered]
        desired = base + variants + utilities
        return [
            replace(
                first,
                metadata={"currentOrder": current, "desiredOrder": desired},
                fix=QuickFix.reorder(desired) if desired != current else None,
            )
        ]

    rule = StructureRule(
        id=CLASS_ORDER_ID,
        name="Base class must precede variants and utilities",
        description=(
            "Within an element, base classes (custom/component/combo) must come "
            "before variant classes (is-*) and utility classes (u-*)."
        ),
        example="base_custom is-active u-hidden",
        severity=Severity.ERROR,
        category=RuleCategory.STRUCTURE,
        analyze_element=analyze,
    )
    return rule


# ---------------------------------------------------------------------------
# Variant requires base
# ---------------------------------------------------------------------------


def create_variant_requires_base_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        cfg = context.config
        variant_prefixes = cfg.get("variantPrefixes") or DEFAULT_VARIANT_PREFIXES
        component_prefixes = cfg.get("componentPrefixes") or ["c-"]
        ordered = _ordered(context)

        variants = [c for c in ordered if _has_prefix(c.name, variant_prefixes)]
        if not variants:
            return []

        for c in ordered:
            if _has_prefix(c.name, component_prefixes):
                return []
            if (
                c.kind is ClassKind.CUSTOM
                and not _is_utility(c)
                and not _has_prefix(c.name, variant_prefixes)
            ):
                return []
            if cfg.get("allowComboAsBase") and c.kind is ClassKind.COMBO:
                return []

        first = variants[0]
        return [
            rule.result(
                f'Found variant "{first.name}" but no base class on this element. '
                'Add a Lumos base custom class (e.g., "hero_wrap") or a component '
                'class (e.g., "c-card").',
                class_name=first.name,
                is_combo=first.is_combo,
                combo_index=first.combo_index,
                metadata={
                    "variants": [v.name for v in variants],
                    "allClasses": [c.name for c in ordered],
                },
            )
        ]

    rule = StructureRule(
        id=VARIANT_REQUIRES_BASE_ID,
        name="Variant requires a base class",
        description=(
            "Variant classes (is-*) must modify an existing base class. Ensure a "
            "Lumos base custom or a component (c-*) is present on the element."
        ),
        example="c-card is-active",
        severity=Severity.ERROR,
        category=RuleCategory.COMPOSITION,
        config_schema={
            "variantPrefixes": ConfigField(
                "Variant prefixes", "string[]", DEFAULT_VARIANT_PREFIXES,
                "Class name prefixes that mark variant tokens.",
            ),
            "componentPrefixes": ConfigField(
                "Component prefixes", "string[]", ["c-"],
                "Prefixes that mark component base classes.",
            ),
            "allowComboAsBase": ConfigField(
                "Allow combo as base", "boolean", False,
                "If true, a combo class counts as a base.",
            ),
        },
        analyze_element=analyze,
    )
    return rule


# ---------------------------------------------------------------------------
# Combo limit
# ---------------------------------------------------------------------------


def create_combo_limit_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        cfg = context.config
        max_combos = cfg.get("maxCombos", 2)
        if not isinstance(max_combos, int) or isinstance(max_combos, bool):
            max_combos = 2
        count_utilities = cfg.get("countUtilities", True) is not False
        variant_prefixes = cfg.get("variantPrefixes") or DEFAULT_VARIANT_PREFIXES
        ordered = _ordered(context)
        if not ordered:
            return []

        base_index = next(
            (
                i
                for i, c in enumerate(ordered)
                if not _is_utility(c) and not _has_prefix(c.name, variant_prefixes)
            ),
            -1,
        )
        if base_index == -1 and cfg.get("assumeFirstAsBase", True):
            base_index = 0

        after_base = ordered[base_index + 1 :]
        counted = [c for c in after_base if count_utilities or not _is_utility(c)]
        if len(counted) <= max_combos:
            return []

        excess = counted[max_combos:]
        first = excess[0]
        extras = '", "'.join(c.name for c in excess)
        label = "Extra" if len(excess) == 1 else "Extras"
        return [
            rule.result(
                f"This element has {len(counted)} classes after the base; the limit "
                f'is {max_combos}. {label}: "{extras}".',
                class_name=first.name,
                is_combo=first.is_combo,
                combo_index=first.combo_index,
                metadata={
                    "maxCombos": max_combos,
                    "countAfterBase": len(counted),
                    "tokensAfterBase": [c.name for c in counted],
                    "allClasses": [c.name for c in ordered],
                    "baseIndex": base_index,
                },
            )
        ]

    rule = StructureRule(
        id=COMBO_LIMIT_ID,
        name="Limit classes after base",
        description="Limit the number of classes applied after the base class on an element.",
        example="base_custom is-large is-active",
        severity=Severity.ERROR,
        category=RuleCategory.COMPOSITION,
        config_schema={
            "maxCombos": ConfigField(
                "Max classes after base", "number", 2,
                "Maximum number of class tokens allowed after the base.",
            ),
            "countUtilities": ConfigField(
                "Count utilities", "boolean", True,
                "If enabled, utility classes count toward the limit.",
            ),
            "variantPrefixes": ConfigField(
                "Variant prefixes", "string[]", DEFAULT_VARIANT_PREFIXES,
                "Prefixes that mark a variant token.",
            ),
            "assumeFirstAsBase": ConfigField(
                "Assume first as base", "boolean", True,
                "If no clear base is detected, treat the first token as base.",
            ),
        },
        analyze_element=analyze,
    )
    return rule
