"""Role detectors shared by the built-in presets.

Each detector inspects one element and either abstains (``None``) or
returns a scored opinion. Presets differ only in how these are configured.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from flowlint.model.element import ElementRole, ElementSnapshot, RoleDetectionResult
from flowlint.model.parsed_class import ParsedClass
from flowlint.model.preset import DetectionContext
from flowlint.roles.tokens import (
    BASE_TOKEN_ROLES,
    SUBPART_HINTS,
    is_container_token,
    role_for_token,
)


# ---------------------------------------------------------------------------
# Main / section
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MainDetector:
    id: str
    names: frozenset[str] = frozenset({"page_main"})
    name_prefixes: tuple[str, ...] = ()
    score: float = 0.95
    tag_score: float = 0.6

    def detect(
        self, element: ElementSnapshot, context: DetectionContext
    ) -> RoleDetectionResult | None:
        for name in element.classes:
            prefixed = bool(self.name_prefixes) and name.startswith(self.name_prefixes)
            if name in self.names or prefixed:
                return RoleDetectionResult(ElementRole.MAIN, self.score, f"class {name}")
        if element.tag == "main":
            return RoleDetectionResult(ElementRole.MAIN, self.tag_score, "<main> tag")
        return None


@dataclass(frozen=True)
class SectionDetector:
    id: str
    name_prefixes: tuple[str, ...] = ("section_",)
    utility_names: frozenset[str] = frozenset()
    score: float = 0.85
    utility_score: float = 0.9
    tag_score: float = 0.7
    token_roles: Mapping[str, ElementRole] = field(
        default_factory=lambda: BASE_TOKEN_ROLES, hash=False
    )

    def detect(
        self, element: ElementSnapshot, context: DetectionContext
    ) -> RoleDetectionResult | None:
        for name in element.classes:
            if name in self.utility_names:
                return RoleDetectionResult(
                    ElementRole.SECTION, self.utility_score, f"utility {name}"
                )

        base = context.first_custom(element)
        if base is not None and base.raw.startswith(self.name_prefixes):
            # section_contain is the container inside a section, not the section.
            if not is_container_token(base.element_token, self.token_roles):
                return RoleDetectionResult(ElementRole.SECTION, self.score, f"class {base.raw}")
            return None

        if element.tag == "section":
            return RoleDetectionResult(ElementRole.SECTION, self.tag_score, "<section> tag")
        return None


# ---------------------------------------------------------------------------
# Wrappers: component roots and child groups
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WrapperGates:
    """Structural gates applied by ``WrapperDetector``.

    Attributes:
        require_direct_parent_container_for_root: Only the direct parent
            (rather than any ancestor) may qualify a wrapper as a root.
        child_group_requires_shared_type_prefix: A child group must share
            its root's first token; a mismatch scores below threshold.
    """

    require_direct_parent_container_for_root: bool = True
    child_group_requires_shared_type_prefix: bool = True


def classify_wrap_name(parsed: ParsedClass) -> ElementRole | None:
    """Naming-only guess for a ``*_wrap``/``*_wrapper`` class."""
    if not parsed.is_wrapper:
        return None
    base = [t.lower() for t in parsed.tokens[:-1]]
    if not base:
        return None
    if len(base) >= 3 or any(t in SUBPART_HINTS for t in base[1:]):
        return ElementRole.CHILD_GROUP
    return ElementRole.COMPONENT_ROOT


@dataclass(frozen=True)
class WrapperDetector:
    id: str
    gates: WrapperGates = field(default_factory=WrapperGates)
    token_roles: Mapping[str, ElementRole] = field(
        default_factory=lambda: BASE_TOKEN_ROLES, hash=False
    )
    root_score: float = 0.9
    child_score: float = 0.88
    mismatch_score: float = 0.5
    named_root_score: float = 0.85
    named_child_score: float = 0.8

    def detect(
        self, element: ElementSnapshot, context: DetectionContext
    ) -> RoleDetectionResult | None:
        base = context.first_custom(element)
        if base is None:
            return None
        named = classify_wrap_name(base)
        if named is None:
            return None

        if context.graph is not None:
            if self._has_container_parent(element.id, context):
                return RoleDetectionResult(
                    ElementRole.COMPONENT_ROOT, self.root_score, "parent is a container"
                )
            root = self._nearest_root(element.id, context)
            if root is not None:
                root_id, root_base = root
                if (
                    self.gates.child_group_requires_shared_type_prefix
                    and (root_base.type or "").lower() != (base.type or "").lower()
                ):
                    return RoleDetectionResult(
                        ElementRole.CHILD_GROUP,
                        self.mismatch_score,
                        f"type prefix differs from root {root_id}",
                    )
                return RoleDetectionResult(
                    ElementRole.CHILD_GROUP, self.child_score, f"nested in root {root_id}"
                )

        if named is ElementRole.COMPONENT_ROOT:
            return RoleDetectionResult(named, self.named_root_score, "wrapper naming")
        return RoleDetectionResult(named, self.named_child_score, "sub-part naming")

    def _is_container(self, element_id: str, context: DetectionContext) -> bool:
        el = context.element(element_id)
        if el is None:
            return False
        parsed = context.first_custom(el)
        return parsed is not None and is_container_token(parsed.element_token, self.token_roles)

    def _has_container_parent(self, element_id: str, context: DetectionContext) -> bool:
        graph = context.graph
        if self.gates.require_direct_parent_container_for_root:
            parent_id = graph.parent_id(element_id)
            return parent_id is not None and self._is_container(parent_id, context)
        # Any ancestor up to the nearest enclosing wrapper.
        for ancestor_id in graph.ancestor_ids(element_id):
            if self._is_container(ancestor_id, context):
                return True
            el = context.element(ancestor_id)
            parsed = context.first_custom(el) if el is not None else None
            if parsed is not None and parsed.is_wrapper:
                return False
        return False

    def _nearest_root(
        self, element_id: str, context: DetectionContext
    ) -> tuple[str, ParsedClass] | None:
        """Nearest wrapper ancestor that is itself a component root."""
        for ancestor_id in context.graph.ancestor_ids(element_id):
            el = context.element(ancestor_id)
            if el is None:
                continue
            parsed = context.first_custom(el)
            if parsed is None or not parsed.is_wrapper:
                continue
            if self._has_container_parent(ancestor_id, context):
                return ancestor_id, parsed
            if classify_wrap_name(parsed) is ElementRole.COMPONENT_ROOT:
                return ancestor_id, parsed
        return None


# ---------------------------------------------------------------------------
# Element token
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ElementTokenDetector:
    id: str
    token_roles: Mapping[str, ElementRole] = field(
        default_factory=lambda: BASE_TOKEN_ROLES, hash=False
    )
    score: float = 0.7

    def detect(
        self, element: ElementSnapshot, context: DetectionContext
    ) -> RoleDetectionResult | None:
        base = context.first_custom(element)
        if base is None or base.is_wrapper:
            return None
        role = role_for_token(base.element_token, self.token_roles)
        if role is None:
            return None
        return RoleDetectionResult(role, self.score, f"element token {base.element_token}")
