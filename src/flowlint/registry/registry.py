"""Rule registry: rules plus their effective per-rule configuration."""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, Mapping

from flowlint.errors import ConfigurationError
from flowlint.model.parsed_class import ClassKind
from flowlint.model.result import Severity
from flowlint.model.rule import Rule, RuleConfiguration, RuleType
from flowlint.registry.serialization import dump_configurations, load_configurations

logger = logging.getLogger("flowlint.registry")


class RuleRegistry:
    """Rules keyed by id, in registration order.

    Registering a rule whose id is already known replaces the rule but keeps
    its configuration, so explicit overrides survive re-registration.
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: dict[str, Rule] = {}
        self._configs: dict[str, RuleConfiguration] = {}
        self.register_rules(rules)

    # -- registration -------------------------------------------------------

    def register_rule(self, rule: Rule) -> None:
        self._rules[rule.id] = rule
        defaults = rule.default_settings()
        config = self._configs.get(rule.id)
        if config is None:
            self._configs[rule.id] = RuleConfiguration(
                rule_id=rule.id,
                enabled=rule.enabled,
                severity=rule.severity,
                custom_settings=defaults,
            )
        else:
            for key, value in defaults.items():
                config.custom_settings.setdefault(key, value)

    def register_rules(self, rules: Iterable[Rule]) -> None:
        for rule in rules:
            self.register_rule(rule)

    def unregister_rule(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)
        self._configs.pop(rule_id, None)

    def clear(self) -> None:
        self._rules.clear()
        self._configs.clear()

    def copy(self) -> RuleRegistry:
        """Independent copy: configuration changes on it do not leak back."""
        clone = RuleRegistry()
        clone._rules = dict(self._rules)
        clone._configs = {k: copy.deepcopy(v) for k, v in self._configs.items()}
        return clone

    # -- lookup -------------------------------------------------------------

    def __contains__(self, rule_id: str) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def get_rule(self, rule_id: str) -> Rule | None:
        return self._rules.get(rule_id)

    def all_rules(self) -> list[Rule]:
        return list(self._rules.values())

    def is_enabled(self, rule: Rule) -> bool:
        config = self._configs.get(rule.id)
        return config.enabled if config is not None else rule.enabled

    def enabled_rules(self) -> list[Rule]:
        return [r for r in self._rules.values() if self.is_enabled(r)]

    def enabled_rules_of_type(self, *types: RuleType) -> list[Rule]:
        return [r for r in self.enabled_rules() if r.type in types]

    def class_rules_for(self, kind: ClassKind) -> list[Rule]:
        """Enabled naming and property rules targeting ``kind``."""
        return [
            r
            for r in self.enabled_rules_of_type(RuleType.NAMING, RuleType.PROPERTY)
            if r.applies_to(kind)
        ]

    def element_rules(self) -> list[Rule]:
        return self.enabled_rules_of_type(RuleType.STRUCTURE)

    def page_rules(self) -> list[Rule]:
        return self.enabled_rules_of_type(RuleType.PAGE)

    # -- configuration ------------------------------------------------------

    def get_rule_configuration(self, rule_id: str) -> RuleConfiguration | None:
        return self._configs.get(rule_id)

    def configurations(self) -> list[RuleConfiguration]:
        return [self._configs[rid] for rid in self._rules if rid in self._configs]

    def settings_for(self, rule: Rule) -> dict[str, Any]:
        config = self._configs.get(rule.id)
        if config is None:
            return rule.default_settings()
        return {**rule.default_settings(), **config.custom_settings}

    def update_rule_configuration(
        self,
        rule_id: str,
        *,
        enabled: bool | None = None,
        severity: Severity | None = None,
        custom_settings: Mapping[str, Any] | None = None,
    ) -> RuleConfiguration:
        """Merge a partial override into ``rule_id``'s configuration."""
        config = self._configs.get(rule_id)
        if config is None:
            raise ConfigurationError(f"Unknown rule: {rule_id}")
        if enabled is not None:
            config.enabled = enabled
        if severity is not None:
            config.severity = severity
        if custom_settings:
            config.custom_settings.update(custom_settings)
        return config

    def reset_rule_configuration(self, rule_id: str) -> None:
        rule = self._rules.get(rule_id)
        if rule is not None:
            self._configs.pop(rule_id, None)
            self.register_rule(rule)

    def configured_severity(self, rule: Rule) -> Severity:
        config = self._configs.get(rule.id)
        return config.severity if config is not None else rule.severity

    def effective_severity(self, rule: Rule, result_severity: Severity | None) -> Severity:
        """Severity a result is reported with.

        A result's own graded severity stands unless the configured
        severity was changed away from the rule default.
        """
        configured = self.configured_severity(rule)
        if result_severity is None or configured is not rule.severity:
            return configured
        return result_severity

    # -- import / export ----------------------------------------------------

    def export_json(self) -> str:
        return dump_configurations(self.configurations())

    def import_json(self, text: str) -> list[str]:
        """Apply a configuration document; returns the rule ids updated.

        The whole document is validated before anything is applied.
        """
        entries = load_configurations(text)
        applied: list[str] = []
        for entry in entries:
            rule_id = entry["rule_id"]
            if rule_id not in self._configs:
                logger.info("Skipping configuration for unknown rule %s", rule_id)
                continue
            self.update_rule_configuration(
                rule_id,
                enabled=entry.get("enabled"),
                severity=entry.get("severity"),
                custom_settings=entry.get("custom_settings"),
            )
            applied.append(rule_id)
        logger.debug("Imported configuration for %d rules", len(applied))
        return applied
