"""Rule execution pipeline: class-level, then element-level, then page-level.

Results come out in a stable order: elements in iteration order, classes in
applied order, rules in registration order. A rule that raises contributes
no results; the failure is logged and published as ``RuleFailed``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Collection, Mapping, Sequence

from flowlint.events.bus import EventBus
from flowlint.events.types import RuleFailed
from flowlint.grammar.base import GrammarAdapter
from flowlint.model.element import ElementRole, ElementSnapshot
from flowlint.model.graph import ElementGraph
from flowlint.model.parsed_class import ClassKind
from flowlint.model.result import RuleResult
from flowlint.model.rule import (
    ElementClass,
    ElementContext,
    NamingContext,
    NamingRule,
    PageContext,
    PropertyContext,
    Rule,
    RuleType,
)
from flowlint.model.style import StyleInfo
from flowlint.registry.registry import RuleRegistry
from flowlint.styles.index import PropertyIndex

logger = logging.getLogger("flowlint.engine")


class RuleRunner:
    """Runs the enabled rules of a registry over one scan's data."""

    def __init__(
        self,
        registry: RuleRegistry,
        grammar: GrammarAdapter,
        *,
        bus: EventBus | None = None,
    ) -> None:
        self.registry = registry
        self.grammar = grammar
        self._bus = bus

    # -- public -------------------------------------------------------------

    def element_classes(
        self, element: ElementSnapshot, combo_flags: Mapping[str, bool] | None = None
    ) -> list[ElementClass]:
        """Applied classes of ``element`` with kind and combo position."""
        flags = combo_flags or {}
        classes: list[ElementClass] = []
        combo_count = 0
        for order, name in enumerate(element.classes):
            kind = self.grammar.parse(name).kind
            if kind is ClassKind.CUSTOM and flags.get(name):
                kind = ClassKind.COMBO
            is_combo = kind is ClassKind.COMBO or bool(flags.get(name))
            combo_index = None
            if is_combo:
                combo_index = combo_count
                combo_count += 1
            classes.append(ElementClass(name, order, kind, is_combo, combo_index))
        return classes

    def run(
        self,
        elements: Sequence[ElementSnapshot],
        *,
        roles: Mapping[str, ElementRole],
        graph: ElementGraph | None,
        all_styles: Sequence[StyleInfo],
        combo_flags: Mapping[str, Mapping[str, bool]] | None = None,
        target_ids: Collection[str] | None = None,
        include_page_rules: bool = True,
    ) -> list[RuleResult]:
        """Run every enabled rule.

        ``elements`` is the whole page; ``target_ids`` restricts class- and
        element-level rules to a subset while roles and structure still
        come from the whole page.
        """
        combo_flags = combo_flags or {}
        property_context = PropertyContext(
            all_styles=tuple(all_styles),
            index=PropertyIndex(all_styles, utility_prefix=self.grammar.utility_prefix),
        )
        class_names = {el.id: list(el.classes) for el in elements}
        targets = [el for el in elements if target_ids is None or el.id in target_ids]
        classes_by_element = {
            el.id: self.element_classes(el, combo_flags.get(el.id)) for el in targets
        }

        results: list[RuleResult] = []
        for el in targets:
            for c in classes_by_element[el.id]:
                results.extend(self._run_class_rules(el, c, roles, graph, property_context))

        lookups = self._lookups(graph, roles, class_names)
        for el in targets:
            base_context = ElementContext(
                element_id=el.id,
                classes=tuple(classes_by_element[el.id]),
                property_context=property_context,
                parse_class=self.grammar.parse,
                **lookups,
            )
            for rule in self.registry.element_rules():
                ctx = replace(base_context, config=self.registry.settings_for(rule))
                found = self._guard(rule, lambda: rule.analyze_element(ctx), element_id=el.id)
                results.extend(
                    self._finalize(rule, r, el.id, roles, graph) for r in found
                )

        if include_page_rules:
            for rule in self.registry.page_rules():
                page = PageContext(
                    roles_by_element=roles,
                    graph=graph,
                    class_names_by_element=class_names,
                    config=self.registry.settings_for(rule),
                )
                found = self._guard(rule, lambda: rule.analyze_page(page))
                results.extend(
                    self._finalize(rule, r, r.element_id, roles, graph) for r in found
                )

        logger.debug("Rule run produced %d results", len(results))
        return results

    # -- class level --------------------------------------------------------

    def _run_class_rules(
        self,
        element: ElementSnapshot,
        c: ElementClass,
        roles: Mapping[str, ElementRole],
        graph: ElementGraph | None,
        property_context: PropertyContext,
    ) -> list[RuleResult]:
        results: list[RuleResult] = []
        for rule in self.registry.class_rules_for(c.kind):
            settings = self.registry.settings_for(rule)
            if rule.type is RuleType.NAMING:
                found = self._guard(
                    rule,
                    lambda: self._run_naming(rule, c.name, settings),
                    class_name=c.name,
                    element_id=element.id,
                )
            else:
                properties = property_context.properties_for(c.name)
                ctx = property_context.with_config(settings)
                found = self._guard(
                    rule,
                    lambda: rule.analyze(c.name, properties, ctx),
                    class_name=c.name,
                    element_id=element.id,
                )
            for r in found:
                r = replace(
                    r,
                    class_name=r.class_name or c.name,
                    is_combo=r.is_combo or c.is_combo,
                    combo_index=r.combo_index if r.combo_index is not None else c.combo_index,
                )
                results.append(self._finalize(rule, r, element.id, roles, graph))
        return results

    @staticmethod
    def _run_naming(
        rule: NamingRule, name: str, settings: Mapping[str, Any]
    ) -> list[RuleResult]:
        if rule.test(name):
            return []
        if rule.evaluate is None:
            return [rule.result(rule.description, class_name=name)]
        result = rule.evaluate(name, NamingContext(config=settings))
        return [result] if result is not None else []

    # -- helpers ------------------------------------------------------------

    @staticmethod
    def _lookups(
        graph: ElementGraph | None,
        roles: Mapping[str, ElementRole],
        class_names: Mapping[str, list[str]],
    ) -> dict[str, Callable[..., Any] | None]:
        def role_of(element_id: str) -> ElementRole:
            return roles.get(element_id, ElementRole.UNKNOWN)

        def names_of(element_id: str) -> list[str]:
            return list(class_names.get(element_id, []))

        return {
            "get_role_for_element": role_of,
            "get_parent_id": graph.parent_id if graph is not None else None,
            "get_children_ids": graph.children_ids if graph is not None else None,
            "get_ancestor_ids": graph.ancestor_ids if graph is not None else None,
            "get_tag_name": graph.tag_name if graph is not None else None,
            "get_class_names_for_element": names_of,
        }

    def _guard(
        self,
        rule: Rule,
        call: Callable[[], list[RuleResult] | None],
        *,
        class_name: str | None = None,
        element_id: str | None = None,
    ) -> list[RuleResult]:
        try:
            return list(call() or [])
        except Exception as exc:
            logger.error(
                "Rule %s failed (class=%s element=%s)",
                rule.id,
                class_name,
                element_id,
                exc_info=True,
            )
            if self._bus is not None:
                self._bus.emit(
                    RuleFailed(
                        rule_id=rule.id,
                        error=str(exc),
                        class_name=class_name,
                        element_id=element_id,
                    )
                )
            return []

    def _finalize(
        self,
        rule: Rule,
        result: RuleResult,
        element_id: str | None,
        roles: Mapping[str, ElementRole],
        graph: ElementGraph | None,
    ) -> RuleResult:
        """Stamp severity, element id, role and parent onto ``result``."""
        element_id = result.element_id or element_id
        metadata = dict(result.metadata)
        if element_id is not None:
            metadata.setdefault("role", roles.get(element_id, ElementRole.UNKNOWN))
            if graph is not None:
                metadata.setdefault("parentId", graph.parent_id(element_id))
        return replace(
            result,
            rule_id=result.rule_id or rule.id,
            severity=self.registry.effective_severity(rule, result.severity),
            element_id=element_id,
            metadata=metadata,
        )

