"""Lumos grammar: underscore-separated, tolerant of camel-case variants."""

from __future__ import annotations

import re

from flowlint.grammar.base import GrammarAdapter

# is-foo, is_bar and isActive all count as combos so that the combo naming
# rule can flag the malformed ones.
LUMOS_COMBO_PATTERN = re.compile(r"^(?:is[-_][A-Za-z0-9_]+|is[A-Z][A-Za-z0-9_]*)$")

LUMOS_GRAMMAR = GrammarAdapter(
    id="lumos",
    separators=("_",),
    combo_pattern=LUMOS_COMBO_PATTERN,
)
