"""Lumos rules."""

from __future__ import annotations

from flowlint.model.rule import Rule
from flowlint.rules.lumos.composition import (
    create_class_order_rule,
    create_combo_limit_rule,
    create_variant_requires_base_rule,
)
from flowlint.rules.lumos.naming import (
    create_class_format_rule,
    create_combo_class_format_rule,
)
from flowlint.rules.lumos.property import (
    create_exact_duplicate_rule,
    create_utility_duplicate_properties_rule,
)


def lumos_rules() -> list[Rule]:
    return [
        create_class_format_rule(),
        create_combo_class_format_rule(),
        create_class_order_rule(),
        create_variant_requires_base_rule(),
        create_combo_limit_rule(),
        create_exact_duplicate_rule(),
        create_utility_duplicate_properties_rule(),
    ]


__all__ = [
    "lumos_rules",
    "create_class_format_rule",
    "create_combo_class_format_rule",
    "create_class_order_rule",
    "create_variant_requires_base_rule",
    "create_combo_limit_rule",
    "create_exact_duplicate_rule",
    "create_utility_duplicate_properties_rule",
]
