"""Canonical page rules: main cardinality and main content."""

from __future__ import annotations

from collections import deque

from flowlint.model.element import ElementRole
from flowlint.model.result import RuleResult, Severity
from flowlint.model.rule import PageContext, PageRule, RuleCategory

MAIN_SINGLETON_ID = "canonical:main-singleton"
MAIN_CHILDREN_ID = "canonical:main-children"

CONTENT_ROLES = frozenset({ElementRole.SECTION, ElementRole.COMPONENT_ROOT})


def create_main_singleton_rule() -> PageRule:
    """Exactly one ``main`` per page.

    No main yields a single page-level violation; every main after the
    first yields one violation on that element.
    """
    rule: PageRule

    def analyze(context: PageContext) -> list[RuleResult]:
        mains = context.elements_with_role(ElementRole.MAIN)
        if not mains:
            return [rule.result("No element with role 'main' detected.")]
        return [
            rule.result(
                "Multiple elements have role 'main'. Keep exactly one.",
                element_id=element_id,
                metadata={"firstMainId": mains[0]},
            )
            for element_id in mains[1:]
        ]

    rule = PageRule(
        id=MAIN_SINGLETON_ID,
        name="Exactly one main role per page",
        description="There must be one and only one element with role 'main'.",
        severity=Severity.ERROR,
        category=RuleCategory.STRUCTURE,
        analyze_page=analyze,
    )
    return rule


def create_main_children_rule() -> PageRule:
    rule: PageRule

    def analyze(context: PageContext) -> list[RuleResult]:
        graph = context.graph
        if graph is None:
            return []
        results: list[RuleResult] = []
        for main_id in context.elements_with_role(ElementRole.MAIN):
            found: list[ElementRole] = []
            queue = deque(graph.children_ids(main_id))
            visited: set[str] = {main_id}
            has_content = False
            while queue:
                current = queue.popleft()
                if current in visited:
                    continue
                visited.add(current)
                role = context.role_for(current)
                if role in CONTENT_ROLES:
                    has_content = True
                    break
                if role not in found:
                    found.append(role)
                queue.extend(c for c in graph.children_ids(current) if c not in visited)
            if has_content:
                continue

            known = [r.value for r in found if r is not ElementRole.UNKNOWN]
            found_text = f" Found roles: {', '.join(known)}." if known else " No semantic roles found."
            results.append(
                rule.result(
                    "Main element must contain at least one section or component root."
                    + found_text,
                    element_id=main_id,
                    metadata={"foundRoles": known},
                )
            )
        return results

    rule = PageRule(
        id=MAIN_CHILDREN_ID,
        name="Main should contain sections or component roots",
        description=(
            "Ensures the main element contains semantic content like sections or "
            "component roots as direct or descendant children."
        ),
        severity=Severity.WARNING,
        category=RuleCategory.STRUCTURE,
        analyze_page=analyze,
    )
    return rule
