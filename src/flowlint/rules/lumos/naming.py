"""Lumos naming rules for custom and combo classes."""

from __future__ import annotations

import re
from typing import Sequence

from flowlint.grammar.normalize import (
    normalize_utility_class,
    normalize_variant_class,
    to_underscore_format,
)
from flowlint.model.parsed_class import ClassKind
from flowlint.model.result import QuickFix, RuleResult, Severity
from flowlint.model.rule import ConfigField, NamingContext, NamingRule, RuleCategory

CLASS_FORMAT_ID = "lumos:naming:class-format"
COMBO_FORMAT_ID = "lumos:naming:combo-class-format"

KNOWN_ELEMENTS = frozenset(
    {
        "wrap",
        "main",
        "contain",
        "container",
        "layout",
        "text",
        "title",
        "icon",
        "img",
        "image",
        "eyebrow",
        "marker",
        "group",
        "label",
        "heading",
        "button",
        "link",
        "field",
        "inner",
        "content",
        "section",
        "item",
        "list",
        "card",
        "x",
        "y",
        "z",
    }
)

_CUSTOM_CHARS = re.compile(r"^[a-z0-9_]+$")
_CUSTOM_SHAPE = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)+$")


# ---------------------------------------------------------------------------
# lumos:naming:class-format
# ---------------------------------------------------------------------------


def _custom_class_ok(name: str) -> bool:
    return bool(_CUSTOM_SHAPE.match(name)) and name.rsplit("_", 1)[-1] in KNOWN_ELEMENTS


def create_class_format_rule() -> NamingRule:
    rule: NamingRule

    def evaluate(name: str, context: NamingContext) -> RuleResult | None:
        if not _CUSTOM_CHARS.match(name):
            suggested = to_underscore_format(name)
            fix = QuickFix.rename(name, suggested) if _CUSTOM_SHAPE.match(suggested) else None
            return rule.result(
                f'Class "{name}" contains invalid characters. Use only lowercase '
                "letters, numbers, and underscores.",
                severity=Severity.ERROR,
                class_name=name,
                fix=fix,
            )

        segments = name.split("_")
        if len(segments) < 2:
            return rule.result(
                f'Class "{name}" must have at least 2 segments separated by '
                "underscores (e.g., type_element).",
                severity=Severity.ERROR,
                class_name=name,
            )
        if any(not s for s in segments):
            suggested = to_underscore_format(name)
            return rule.result(
                f'Class "{name}" contains empty segments. Each segment must contain '
                "at least one character.",
                severity=Severity.ERROR,
                class_name=name,
                fix=QuickFix.rename(name, suggested) if _CUSTOM_SHAPE.match(suggested) else None,
            )

        element = segments[-1]
        if element in KNOWN_ELEMENTS:
            return None
        project_terms: Sequence[str] = context.config.get("projectDefinedElements") or ()
        if element in project_terms:
            return rule.result(
                f'Class "{name}" uses project-defined element "{element}".',
                severity=Severity.SUGGESTION,
                class_name=name,
                example=None,
            )
        return rule.result(
            f'Class "{name}" uses unrecognized element "{element}". Consider using a '
            "known element term or adding it to project configuration.",
            severity=Severity.SUGGESTION,
            class_name=name,
            example=None,
            metadata={"unrecognizedElement": element},
        )

    rule = NamingRule(
        id=CLASS_FORMAT_ID,
        name="Lumos Custom Class Format",
        description=(
            "Custom classes must be lowercase and underscore-separated with at least "
            "2 segments: type_element or type_variant_element. The final segment "
            "should describe the element (e.g. wrap, text, icon)."
        ),
        example="footer_wrap, footer_link_wrap, hero_secondary_content_wrap",
        severity=Severity.ERROR,
        category=RuleCategory.FORMAT,
        target_class_kinds=frozenset({ClassKind.CUSTOM}),
        config_schema={
            "projectDefinedElements": ConfigField(
                label="Project-defined element terms",
                type="string[]",
                default=[],
                description=(
                    "Terms accepted as final class segments for this project "
                    "(e.g. 'flag', 'chip', 'stat')."
                ),
            )
        },
        test=_custom_class_ok,
        evaluate=evaluate,
    )
    return rule


# ---------------------------------------------------------------------------
# lumos:naming:combo-class-format
# ---------------------------------------------------------------------------


def _combo_class_ok(name: str) -> bool:
    if name.startswith("u-"):
        return normalize_utility_class(name) == name
    if name.startswith("is"):
        return normalize_variant_class(name) == name
    return False


def create_combo_class_format_rule() -> NamingRule:
    rule: NamingRule

    def evaluate(name: str, context: NamingContext) -> RuleResult | None:
        if name.startswith("c-"):
            return rule.result(
                "Component base classes (c-*) cannot be used as a combo. Use a "
                "variant (is-) or a utility (u-).",
                class_name=name,
                is_combo=True,
                example="base_custom is-active",
            )
        if name.startswith("u-"):
            normalized = normalize_utility_class(name)
            if normalized == name:
                return None
            return rule.result(
                "Utility classes used in the combo position must be lowercase, "
                "hyphen-separated, and start with u-.",
                class_name=name,
                fix=QuickFix.rename(name, normalized) if normalized else None,
            )
        if name.startswith("is"):
            normalized = normalize_variant_class(name)
            if normalized == name:
                return None
            return rule.result(
                "Combo custom classes must be lowercase variant tokens starting with "
                "is- or be valid utilities starting with u-.",
                class_name=name,
                is_combo=True,
                example="base_custom is-active",
                fix=QuickFix.rename(name, normalized) if normalized else None,
            )
        return rule.result(
            "Combo classes must be either a variant (is-) or a utility (u-).",
            class_name=name,
            is_combo=True,
        )

    rule = NamingRule(
        id=COMBO_FORMAT_ID,
        name="Combo class format",
        description=(
            "After the base custom class, combos must be either a variant (is-) or "
            "a utility (u-). Component bases (c-*) are not valid combos."
        ),
        example="base_custom is-active u-hidden",
        severity=Severity.ERROR,
        category=RuleCategory.FORMAT,
        target_class_kinds=frozenset({ClassKind.COMBO, ClassKind.UTILITY}),
        test=_combo_class_ok,
        evaluate=evaluate,
    )
    return rule
