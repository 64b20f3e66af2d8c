"""Canonical element rules built on detected roles."""

from __future__ import annotations

from flowlint.model.element import ElementRole
from flowlint.model.parsed_class import ClassKind, ParsedClass
from flowlint.model.result import RuleResult, Severity
from flowlint.model.rule import ElementContext, RuleCategory, StructureRule

SECTION_PARENT_IS_MAIN_ID = "canonical:section-parent-is-main"
COMPONENT_ROOT_STRUCTURE_ID = "canonical:component-root-structure"
CHILDGROUP_KEY_MATCH_ID = "canonical:childgroup-key-match"
MISSING_CLASS_ON_DIV_ID = "canonical:missing-class-on-div"
ROOT_NO_DISPLAY_UTILITIES_ID = "canonical:component-root-no-display-utilities"

BLOCK_TAGS = frozenset({"div", "block"})

STRUCTURE_CHILD_ROLES = frozenset(
    {ElementRole.LAYOUT, ElementRole.CONTENT, ElementRole.CHILD_GROUP}
)


def _first_class(context: ElementContext) -> tuple[str, bool]:
    if not context.classes:
        return "", False
    first = context.classes[0]
    return first.name, first.is_combo


# ---------------------------------------------------------------------------
# Section parent
# ---------------------------------------------------------------------------


def create_section_parent_is_main_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        role_of = context.get_role_for_element
        if role_of is None or context.get_parent_id is None:
            return []
        if role_of(context.element_id) is not ElementRole.SECTION:
            return []
        parent_id = context.get_parent_id(context.element_id)
        if parent_id is not None and role_of(parent_id) is ElementRole.MAIN:
            return []
        name, is_combo = _first_class(context)
        return [
            rule.result(
                "This section is not a direct child of the main role.",
                class_name=name,
                is_combo=is_combo,
            )
        ]

    rule = StructureRule(
        id=SECTION_PARENT_IS_MAIN_ID,
        name="Section must be a direct child of main",
        description="Ensures a section element is directly under the main role.",
        example='<main><section class="section_hero"/></main>',
        severity=Severity.ERROR,
        category=RuleCategory.SEMANTICS,
        analyze_element=analyze,
    )
    return rule


# ---------------------------------------------------------------------------
# Component root structure
# ---------------------------------------------------------------------------


def create_component_root_structure_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        role_of = context.get_role_for_element
        if role_of is None or context.get_ancestor_ids is None:
            return []
        if role_of(context.element_id) is not ElementRole.COMPONENT_ROOT:
            return []

        name, is_combo = _first_class(context)
        results: list[RuleResult] = []
        ancestors = context.get_ancestor_ids(context.element_id)
        if not any(role_of(a) is ElementRole.SECTION for a in ancestors):
            results.append(
                rule.result(
                    "Component root is not within a section.",
                    severity=Severity.ERROR,
                    class_name=name,
                    is_combo=is_combo,
                )
            )

        if context.get_children_ids is not None:
            children = context.get_children_ids(context.element_id)
            if not any(role_of(c) in STRUCTURE_CHILD_ROLES for c in children):
                results.append(
                    rule.result(
                        "Add a layout, content, or childGroup inside this component root.",
                        severity=Severity.WARNING,
                        class_name=name,
                        is_combo=is_combo,
                    )
                )
        return results

    rule = StructureRule(
        id=COMPONENT_ROOT_STRUCTURE_ID,
        name="Component root must live under a section and contain structure",
        description=(
            "Component root must be under a section and contain layout/content/childGroup."
        ),
        example='<section><div class="hero_wrap">...</div></section>',
        severity=Severity.WARNING,
        category=RuleCategory.SEMANTICS,
        analyze_element=analyze,
    )
    return rule


# ---------------------------------------------------------------------------
# Child group key match
# ---------------------------------------------------------------------------


def _base_custom(names: list[str], parse) -> ParsedClass | None:
    """Best base custom class of a child group.

    Non-wrapper names are preferred, then names with more tokens.
    """
    best: ParsedClass | None = None
    best_score = -1
    for name in names:
        parsed = parse(name)
        if not parsed.is_custom:
            continue
        score = (0 if parsed.is_wrapper else 10) + len(parsed.tokens)
        if score > best_score:
            best, best_score = parsed, score
    return best


def _first_custom(names: list[str], parse) -> ParsedClass | None:
    for name in names:
        parsed = parse(name)
        if parsed.is_custom:
            return parsed
    return None


def create_childgroup_key_match_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        role_of = context.get_role_for_element
        parse = context.parse_class
        if (
            role_of is None
            or parse is None
            or context.get_ancestor_ids is None
            or context.get_class_names_for_element is None
        ):
            return []
        if role_of(context.element_id) is not ElementRole.CHILD_GROUP:
            return []

        root_id = next(
            (
                a
                for a in context.get_ancestor_ids(context.element_id)
                if role_of(a) is ElementRole.COMPONENT_ROOT
            ),
            None,
        )
        if root_id is None:
            name, is_combo = _first_class(context)
            return [
                rule.result(
                    "Child group has no component root ancestor.",
                    class_name=name,
                    is_combo=is_combo,
                )
            ]

        child = _base_custom(context.class_names, parse)
        if child is None:
            return []
        root = _first_custom(context.get_class_names_for_element(root_id), parse)
        child_key = child.component_key
        root_key = root.component_key if root is not None else None

        if child_key and root_key and child_key == root_key:
            return []

        child_parts = (child_key or "").split("_")
        extends_single_token_root = (
            bool(child_key and root_key)
            and "_" not in root_key
            and len(child_parts) >= 2
            and child_parts[0] == root_key
        )
        if extends_single_token_root and not child.variation:
            return []

        if not child_key:
            message = (
                f'Could not extract component key from "{child.raw}". '
                'Use "<name>_<variant>_<group>_wrap".'
            )
        elif not root_key:
            root_name = root.raw if root is not None else ""
            message = (
                f'Could not extract component key from root "{root_name}". '
                'Use "<name>_<variant>_wrap".'
            )
        elif extends_single_token_root:
            message = (
                f'Child group key "{child_key}" introduces a variant but root key '
                f'"{root_key}" has none. Prefer "{root_key}_{child.element_token}".'
            )
        else:
            message = (
                f'Child group key "{child_key}" does not match root key "{root_key}". '
                f'Rename to "{root_key}_[element]_wrap".'
            )
        return [
            rule.result(
                message,
                class_name=child.raw,
                metadata={"componentRootId": root_id, "childKey": child_key, "rootKey": root_key},
            )
        ]

    rule = StructureRule(
        id=CHILDGROUP_KEY_MATCH_ID,
        name="Child group key must match its nearest component root",
        description=(
            "Child groups must share the same component key (name_variant) as their "
            "nearest component root ancestor."
        ),
        example="hero_primary_wrap -> hero_primary_cta_wrap",
        severity=Severity.ERROR,
        category=RuleCategory.STRUCTURE,
        analyze_element=analyze,
    )
    return rule


# ---------------------------------------------------------------------------
# Unstyled blocks
# ---------------------------------------------------------------------------


def create_missing_class_on_div_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        if context.get_tag_name is None or context.classes:
            return []
        tag = context.get_tag_name(context.element_id)
        if tag is None or tag.lower() not in BLOCK_TAGS:
            return []
        return [
            rule.result(
                "This block element has no style classes assigned. Add a class or "
                "remove the element if it serves no purpose.",
                element_id=context.element_id,
                metadata={"tagName": tag},
            )
        ]

    rule = StructureRule(
        id=MISSING_CLASS_ON_DIV_ID,
        name="Block elements must have style classes",
        description=(
            "Every block element should carry at least one class. Unstyled blocks "
            "usually mean an unfinished section or a leftover wrapper."
        ),
        example="Add a style class or remove the empty block",
        severity=Severity.WARNING,
        category=RuleCategory.STRUCTURE,
        analyze_element=analyze,
    )
    return rule


# ---------------------------------------------------------------------------
# Display utilities on roots
# ---------------------------------------------------------------------------


def create_component_root_no_display_utilities_rule() -> StructureRule:
    rule: StructureRule

    def analyze(context: ElementContext) -> list[RuleResult]:
        if context.property_context is None or context.role is not ElementRole.COMPONENT_ROOT:
            return []
        return [
            rule.result(
                f'Component root should not use display utility "{c.name}". Set '
                "display in the root's own class or on a child element.",
                class_name=c.name,
                is_combo=c.is_combo,
                combo_index=c.combo_index,
            )
            for c in context.classes
            if c.kind is ClassKind.UTILITY and "display" in context.properties_for(c.name)
        ]

    rule = StructureRule(
        id=ROOT_NO_DISPLAY_UTILITIES_ID,
        name="No display utilities on component roots",
        description="Component roots should not take their display mode from utility classes.",
        example="Avoid u-flex, u-block or u-none on hero_wrap",
        severity=Severity.WARNING,
        category=RuleCategory.PERFORMANCE,
        analyze_element=analyze,
    )
    return rule
