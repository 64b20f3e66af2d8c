"""Client-First grammar: kebab-case folders joined with ``_``, strict ``is-`` combos."""

from __future__ import annotations

import re

from flowlint.grammar.base import GrammarAdapter

CLIENT_FIRST_GRAMMAR = GrammarAdapter(
    id="client-first",
    separators=("_", "-"),
    combo_pattern=re.compile(r"^is-"),
)
