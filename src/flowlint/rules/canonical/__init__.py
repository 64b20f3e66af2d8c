"""Preset-agnostic rules shared by every built-in preset."""

from __future__ import annotations

from flowlint.model.rule import Rule
from flowlint.rules.canonical.page import create_main_children_rule, create_main_singleton_rule
from flowlint.rules.canonical.structure import (
    create_childgroup_key_match_rule,
    create_component_root_no_display_utilities_rule,
    create_component_root_structure_rule,
    create_missing_class_on_div_rule,
    create_section_parent_is_main_rule,
)


def canonical_rules() -> list[Rule]:
    return [
        create_section_parent_is_main_rule(),
        create_component_root_structure_rule(),
        create_childgroup_key_match_rule(),
        create_missing_class_on_div_rule(),
        create_component_root_no_display_utilities_rule(),
        create_main_singleton_rule(),
        create_main_children_rule(),
    ]


__all__ = [
    "canonical_rules",
    "create_main_singleton_rule",
    "create_main_children_rule",
    "create_section_parent_is_main_rule",
    "create_component_root_structure_rule",
    "create_childgroup_key_match_rule",
    "create_missing_class_on_div_rule",
    "create_component_root_no_display_utilities_rule",
]
