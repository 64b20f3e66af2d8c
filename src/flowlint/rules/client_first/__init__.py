"""Client-First rules."""

from __future__ import annotations

from flowlint.model.rule import Rule
from flowlint.rules.client_first.naming import (
    create_class_format_rule,
    create_utility_no_underscore_rule,
    create_variant_is_prefix_rule,
)
from flowlint.rules.client_first.property import create_prefer_rem_rule
from flowlint.rules.client_first.structure import (
    create_combo_not_alone_rule,
    create_containers_clean_rule,
    create_nav_outside_main_rule,
    create_no_padding_on_inner_rule,
    create_no_utilities_on_root_rule,
    create_padding_section_requires_global_rule,
)


def client_first_rules() -> list[Rule]:
    return [
        create_class_format_rule(),
        create_variant_is_prefix_rule(),
        create_utility_no_underscore_rule(),
        create_prefer_rem_rule(),
        create_combo_not_alone_rule(),
        create_no_utilities_on_root_rule(),
        create_containers_clean_rule(),
        create_no_padding_on_inner_rule(),
        create_nav_outside_main_rule(),
        create_padding_section_requires_global_rule(),
    ]


__all__ = [
    "client_first_rules",
    "create_class_format_rule",
    "create_variant_is_prefix_rule",
    "create_utility_no_underscore_rule",
    "create_prefer_rem_rule",
    "create_combo_not_alone_rule",
    "create_no_utilities_on_root_rule",
    "create_no_padding_on_inner_rule",
    "create_containers_clean_rule",
    "create_nav_outside_main_rule",
    "create_padding_section_requires_global_rule",
]
