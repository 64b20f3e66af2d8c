"""Grammar adapter: kind classification and tokenization of class names.

Adapters differ only in separators, prefixes and the combo pattern. The
token extraction in ``GrammarAdapter._parse_custom`` is shared so that every
preset derives ``type``/``variation``/``element_token`` the same way.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from flowlint.model.parsed_class import ClassKind, ParsedClass

WRAPPER_TOKENS = frozenset({"wrap", "wrapper"})


@dataclass(frozen=True)
class GrammarAdapter:
    """A preset's class naming convention.

    Attributes:
        id: Grammar identifier, usually the preset id.
        separators: Characters that split a custom class into tokens.
        utility_prefix: Prefix marking utility classes.
        component_prefix: Prefix marking component classes.
        combo_prefix: Canonical prefix for combo (variant) classes.
        combo_pattern: Pattern deciding whether a name is a combo class.
        custom_first_required: Whether a custom class must precede
            utilities and combos on an element.
    """

    id: str
    separators: tuple[str, ...] = ("_",)
    utility_prefix: str = "u-"
    component_prefix: str = "c-"
    combo_prefix: str = "is-"
    combo_pattern: re.Pattern[str] = re.compile(r"^is-")
    custom_first_required: bool = True

    def classify(self, raw: str) -> ClassKind:
        """Kind of ``raw``: utility, component, combo, else custom."""
        if raw.startswith(self.utility_prefix):
            return ClassKind.UTILITY
        if raw.startswith(self.component_prefix):
            return ClassKind.COMPONENT
        if self.combo_pattern.search(raw):
            return ClassKind.COMBO
        return ClassKind.CUSTOM

    def tokenize(self, raw: str) -> list[str]:
        normalized = raw
        for sep in self.separators[1:]:
            normalized = normalized.replace(sep, self.separators[0])
        return [t for t in normalized.split(self.separators[0]) if t]

    def parse(self, raw: str) -> ParsedClass:
        """Parse ``raw`` into a ParsedClass. Never raises."""
        raw = raw if isinstance(raw, str) else str(raw)
        kind = self.classify(raw)
        if kind is not ClassKind.CUSTOM:
            return ParsedClass(raw=raw, kind=kind)
        return self._parse_custom(raw)

    def _parse_custom(self, raw: str) -> ParsedClass:
        tokens = self.tokenize(raw)
        if not tokens:
            return ParsedClass(raw=raw, kind=ClassKind.CUSTOM)

        variation = "_".join(tokens[1:-1]) if len(tokens) > 2 else None
        element_token = tokens[-1] if len(tokens) >= 2 else None
        return ParsedClass(
            raw=raw,
            kind=ClassKind.CUSTOM,
            tokens=tuple(tokens),
            type=tokens[0],
            variation=variation or None,
            element_token=element_token,
            component_key=component_key(tokens),
        )


def component_key(tokens: list[str]) -> str | None:
    """Key shared by a component root and its child groups.

    ``hero_primary_wrap`` and ``hero_primary_cta_wrap`` both give
    ``hero_primary``; ``hero_wrap`` gives ``hero``.
    """
    if not tokens:
        return None
    if len(tokens) >= 2 and tokens[-1].lower() in WRAPPER_TOKENS:
        key_tokens = tokens[:-1]
    else:
        key_tokens = tokens
    return "_".join(key_tokens[:2])
