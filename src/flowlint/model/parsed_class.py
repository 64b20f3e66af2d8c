"""Parsed class model: the token structure a grammar derives from a class name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ClassKind(Enum):
    """The four kinds a grammar can assign to a class name."""

    UTILITY = "utility"
    COMPONENT = "component"
    COMBO = "combo"
    CUSTOM = "custom"


ALL_CLASS_KINDS = frozenset(ClassKind)


@dataclass(frozen=True)
class ParsedClass:
    """A class name broken down by the active grammar.

    Attributes:
        raw: The class name exactly as applied.
        kind: Utility, component, combo or custom.
        tokens: Separator-split segments (custom kind only, empty otherwise).
        type: First token.
        variation: Middle tokens joined with ``_`` (3+ tokens only).
        element_token: Last token (2+ tokens only).
        component_key: ``name_variant`` key shared by a component root and
            its child groups.
    """

    raw: str
    kind: ClassKind
    tokens: tuple[str, ...] = ()
    type: str | None = None
    variation: str | None = None
    element_token: str | None = None
    component_key: str | None = None

    @property
    def is_custom(self) -> bool:
        return self.kind is ClassKind.CUSTOM

    @property
    def is_wrapper(self) -> bool:
        """True when the last token is ``wrap`` or ``wrapper``."""
        return (self.element_token or "").lower() in ("wrap", "wrapper")
