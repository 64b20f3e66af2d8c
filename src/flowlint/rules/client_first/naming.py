"""Client-First naming rules."""

from __future__ import annotations

import re

from flowlint.grammar.normalize import normalize_variant_class, to_hyphen_format
from flowlint.model.parsed_class import ClassKind
from flowlint.model.result import QuickFix, RuleResult, Severity
from flowlint.model.rule import NamingContext, NamingRule, RuleCategory

CLASS_FORMAT_ID = "cf:naming:class-format"
VARIANT_IS_PREFIX_ID = "cf:naming:variant-is-prefix"
UTILITY_NO_UNDERSCORE_ID = "cf:naming:utility-no-underscore"

_KEBAB = r"[a-z0-9]+(?:-[a-z0-9]+)*"
FOLDER_FORMAT = re.compile(rf"^{_KEBAB}(?:_{_KEBAB})?$")
VARIANT_FORMAT = re.compile(rf"^is-{_KEBAB}$")


def _suggest_folder_name(name: str) -> str | None:
    folder, sep, element = name.partition("_")
    parts = [to_hyphen_format(folder)]
    if sep:
        parts.append(to_hyphen_format(element.replace("_", "-")))
    suggested = "_".join(p for p in parts if p)
    return suggested if FOLDER_FORMAT.match(suggested) else None


def create_class_format_rule() -> NamingRule:
    rule: NamingRule

    def evaluate(name: str, context: NamingContext) -> RuleResult | None:
        if FOLDER_FORMAT.match(name):
            return None
        suggested = _suggest_folder_name(name)
        if name.count("_") > 1:
            problem = "uses more than one underscore; only the folder separator may be one"
        else:
            problem = "must be lowercase kebab-case words"
        return rule.result(
            f'Class "{name}" {problem} (folder_element-name).',
            class_name=name,
            fix=QuickFix.rename(name, suggested) if suggested and suggested != name else None,
        )

    rule = NamingRule(
        id=CLASS_FORMAT_ID,
        name="Client-First: Custom class format",
        description=(
            "Custom classes use lowercase kebab-case words, optionally grouped in a "
            "folder with a single underscore: folder_element-name."
        ),
        example="hero-header_content, footer_link-list",
        severity=Severity.ERROR,
        category=RuleCategory.FORMAT,
        target_class_kinds=frozenset({ClassKind.CUSTOM}),
        test=lambda name: bool(FOLDER_FORMAT.match(name)),
        evaluate=evaluate,
    )
    return rule


def create_variant_is_prefix_rule() -> NamingRule:
    rule: NamingRule

    def evaluate(name: str, context: NamingContext) -> RuleResult | None:
        normalized = normalize_variant_class(name)
        return rule.result(
            f'Combo class "{name}" must be a lowercase kebab-case variant starting with "is-".',
            class_name=name,
            is_combo=True,
            fix=QuickFix.rename(name, normalized) if normalized and normalized != name else None,
        )

    rule = NamingRule(
        id=VARIANT_IS_PREFIX_ID,
        name="Client-First: Variants use the is- prefix",
        description="Combo classes are variants and must be named is-[variant] in kebab-case.",
        example="button is-brand, header_content is-home",
        severity=Severity.WARNING,
        category=RuleCategory.FORMAT,
        target_class_kinds=frozenset({ClassKind.COMBO}),
        test=lambda name: bool(VARIANT_FORMAT.match(name)),
        evaluate=evaluate,
    )
    return rule


def create_utility_no_underscore_rule() -> NamingRule:
    rule: NamingRule

    def evaluate(name: str, context: NamingContext) -> RuleResult | None:
        if "_" not in name:
            return None
        suggested = name.replace("_", "-")
        return rule.result(
            f'Utility class "{name}" contains underscores. Use dashes instead: "{suggested}".',
            class_name=name,
            fix=QuickFix.rename(name, suggested, scope="global"),
        )

    rule = NamingRule(
        id=UTILITY_NO_UNDERSCORE_ID,
        name="Client-First: Utility classes use dashes only",
        description=(
            "Utility classes in Client-First must use dashes (-) as separators. "
            "Underscores are reserved for custom class folders."
        ),
        example="u-text-size-large, u-padding-global",
        severity=Severity.ERROR,
        category=RuleCategory.FORMAT,
        target_class_kinds=frozenset({ClassKind.UTILITY}),
        test=lambda name: "_" not in name,
        evaluate=evaluate,
    )
    return rule
