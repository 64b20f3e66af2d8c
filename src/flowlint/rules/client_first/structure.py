"""Client-First element rules."""

from __future__ import annotations

import re

from flowlint.model.element import ElementRole
from flowlint.model.parsed_class import ClassKind
from flowlint.model.result import QuickFix, RuleResult, Severity
from flowlint.model.rule import ElementContext, RuleCategory, StructureRule

COMBO_NOT_ALONE_ID = "cf:composition:combo-not-alone"
NO_UTILITIES_ON_ROOT_ID = "cf:structure:no-utilities-on-root"
NO_PADDING_ON_INNER_ID = "cf:structure:no-padding-on-inner"
CONTAINERS_CLEAN_ID = "cf:structure:containers-clean"
NAV_OUTSIDE_MAIN_ID = "cf:structure:nav-outside-main"
PADDING_SECTION_REQUIRES_GLOBAL_ID = "cf:composition:padding-section-requires-global"

SPACING_PROPERTIES = frozenset({"gap", "row-gap", "column-gap"})
NAV_CLASS = re.compile(r"^nav(?:bar|igation)?(?:[_-]|$)", re.IGNORECASE)
PADDING_SECTION = re.compile(r"^padding-section-")


def create_combo_not_alone_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        ordered = sorted(context.classes, key=lambda c: c.order)
        combos = [c for c in ordered if c.name.startswith("is-")]
        if not combos:
            return []
        if any(
            c.kind in (ClassKind.CUSTOM, ClassKind.UTILITY)
            for c in ordered
            if not c.name.startswith("is-")
        ):
            return []
        first = combos[0]
        return [
            rule.result(
                f'Combo class "{first.name}" has no base class on this element. Add a '
                f'base class (e.g., "button {first.name}").',
                class_name=first.name,
                is_combo=first.is_combo,
                combo_index=first.combo_index,
                metadata={
                    "combos": [c.name for c in combos],
                    "allClasses": [c.name for c in ordered],
                },
            )
        ]

    rule = StructureRule(
        id=COMBO_NOT_ALONE_ID,
        name="Client-First: Combo class requires a base",
        description=(
            "Combo classes (is-*) are variant modifiers that must be applied "
            "alongside a base class."
        ),
        example="button is-brand, header_content is-home",
        severity=Severity.ERROR,
        category=RuleCategory.COMPOSITION,
        analyze_element=analyze,
    )
    return rule


def create_no_utilities_on_root_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        if context.role is not ElementRole.COMPONENT_ROOT:
            return []
        return [
            rule.result(
                "Move utilities off the component root and into an inner wrapper.",
                class_name=c.name,
                is_combo=c.is_combo,
            )
            for c in context.classes
            if c.kind is ClassKind.UTILITY
        ]

    rule = StructureRule(
        id=NO_UTILITIES_ON_ROOT_ID,
        name="Client-First: No utilities on component root",
        description="Move utilities off the component root and into an inner wrapper.",
        example="Root: feature-card_wrapper, Inner: feature-card_content with u-padding-*",
        severity=Severity.WARNING,
        category=RuleCategory.PERFORMANCE,
        analyze_element=analyze,
    )
    return rule


def create_no_padding_on_inner_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        if context.property_context is None or context.role is not ElementRole.CHILD_GROUP:
            return []
        results: list[RuleResult] = []
        for c in context.classes:
            if c.kind is not ClassKind.UTILITY:
                continue
            props = context.properties_for(c.name)
            if any(key.startswith("padding") for key in props):
                results.append(
                    rule.result(
                        "Avoid padding utilities on inner elements; use a custom class instead.",
                        class_name=c.name,
                        is_combo=c.is_combo,
                    )
                )
        return results

    rule = StructureRule(
        id=NO_PADDING_ON_INNER_ID,
        name="Client-First: Avoid padding utilities on inner elements",
        description="Use custom classes for inner padding; avoid padding utilities on nested groups.",
        example="card_content u-padding-small -> move padding to card_content",
        severity=Severity.SUGGESTION,
        category=RuleCategory.FORMAT,
        analyze_element=analyze,
    )
    return rule


def _is_spacing(prop: str) -> bool:
    return prop.startswith(("padding", "margin")) or prop in SPACING_PROPERTIES


def create_containers_clean_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        if context.property_context is None:
            return []
        if context.role not in (ElementRole.COMPONENT_ROOT, ElementRole.CONTAINER):
            return []
        return [
            rule.result(
                "Containers should not carry spacing utilities; apply spacing on an "
                "inner wrapper.",
                class_name=c.name,
                is_combo=c.is_combo,
                combo_index=c.combo_index,
            )
            for c in context.classes
            if c.kind is ClassKind.UTILITY
            and any(_is_spacing(prop) for prop in context.properties_for(c.name))
        ]

    rule = StructureRule(
        id=CONTAINERS_CLEAN_ID,
        name="Client-First: Containers should be clean",
        description=(
            "Do not apply padding, margin or gap utilities to containers or "
            "component roots; move spacing to an inner wrapper."
        ),
        example="container-large u-padding-medium -> move u-padding-medium to an inner wrapper",
        severity=Severity.WARNING,
        category=RuleCategory.SEMANTICS,
        analyze_element=analyze,
    )
    return rule


def create_nav_outside_main_rule() -> StructureRule:
    """``<nav>`` belongs beside main-wrapper, not inside it."""
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        if context.get_tag_name is None or context.get_ancestor_ids is None:
            return []
        tag = context.get_tag_name(context.element_id)
        by_tag = (tag or "").lower() == "nav"
        by_class = any(NAV_CLASS.match(c.name) for c in context.classes)
        if not by_tag and not by_class:
            return []

        inside_main = False
        for ancestor_id in context.get_ancestor_ids(context.element_id):
            if (
                context.get_role_for_element is not None
                and context.get_role_for_element(ancestor_id) is ElementRole.MAIN
            ):
                inside_main = True
                break
            if context.get_class_names_for_element is not None and (
                "main-wrapper" in context.get_class_names_for_element(ancestor_id)
            ):
                inside_main = True
                break
        if not inside_main:
            return []

        first = context.classes[0].name if context.classes else ""
        label = "<nav>" if by_tag else first
        return [
            rule.result(
                f'Navigation element "{label}" is inside main-wrapper. Place nav '
                "outside main-wrapper; it is not page-specific content.",
                class_name=first,
                element_id=context.element_id,
                metadata={"detectedBy": "tag" if by_tag else "class", "tagName": tag},
            )
        ]

    rule = StructureRule(
        id=NAV_OUTSIDE_MAIN_ID,
        name="Client-First: Nav outside main-wrapper",
        description=(
            "Navigation elements should sit outside main-wrapper since nav content "
            "is not page-specific."
        ),
        example="Place <nav> as a sibling of main-wrapper, not inside it",
        severity=Severity.WARNING,
        category=RuleCategory.STRUCTURE,
        analyze_element=analyze,
    )
    return rule


def create_padding_section_requires_global_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        sections = [c for c in context.classes if PADDING_SECTION.match(c.name)]
        if not sections or "padding-global" in context.class_names:
            return []
        first = sections[0]
        return [
            rule.result(
                f'"{first.name}" should be on the same element as "padding-global". '
                "Add the padding-global class to this element.",
                class_name=first.name,
                is_combo=first.is_combo,
                combo_index=first.combo_index,
                fix=QuickFix.add("padding-global"),
            )
        ]

    rule = StructureRule(
        id=PADDING_SECTION_REQUIRES_GLOBAL_ID,
        name="Client-First: padding-section requires padding-global",
        description=(
            "The padding-section-[size] class belongs on the same element as "
            "padding-global."
        ),
        example="padding-global padding-section-medium",
        severity=Severity.WARNING,
        category=RuleCategory.COMPOSITION,
        analyze_element=analyze,
    )
    return rule
