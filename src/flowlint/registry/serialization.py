"""Versioned JSON format for rule configurations."""

from __future__ import annotations

import json
from typing import Any, Iterable

from flowlint.errors import ConfigValidationError
from flowlint.model.result import Severity
from flowlint.model.rule import RuleConfiguration

CONFIG_VERSION = 1
_SEVERITIES = {s.value: s for s in Severity}


def dump_configurations(configs: Iterable[RuleConfiguration]) -> str:
    """Serialize configurations ordered by rule id."""
    ordered = sorted(configs, key=lambda c: c.rule_id)
    document = {"version": CONFIG_VERSION, "rules": [c.to_dict() for c in ordered]}
    return json.dumps(document, indent=2)


def load_configurations(text: str) -> list[dict[str, Any]]:
    """Parse and validate a configuration document.

    Returns normalized entries with keys ``rule_id`` and, when present,
    ``enabled``, ``severity`` (a Severity) and ``custom_settings``.
    Raises ConfigValidationError listing every problem found.
    """
    try:
        document = json.loads(text)
    except (TypeError, json.JSONDecodeError) as exc:
        raise ConfigValidationError(
            f"Invalid configuration JSON: {exc}", problems=[f"invalid JSON: {exc}"], cause=exc
        ) from exc

    problems: list[str] = []
    if not isinstance(document, dict):
        raise ConfigValidationError(
            "Configuration must be a JSON object", problems=["root is not an object"]
        )

    version = document.get("version")
    if version != CONFIG_VERSION:
        problems.append(f"unsupported version {version!r} (expected {CONFIG_VERSION})")

    rules = document.get("rules")
    entries: list[dict[str, Any]] = []
    if not isinstance(rules, list):
        problems.append("'rules' must be a list")
        rules = []

    for i, raw in enumerate(rules):
        where = f"rules[{i}]"
        if not isinstance(raw, dict):
            problems.append(f"{where} is not an object")
            continue
        entry: dict[str, Any] = {}
        rule_id = raw.get("ruleId")
        if not isinstance(rule_id, str) or not rule_id:
            problems.append(f"{where}.ruleId must be a non-empty string")
        else:
            entry["rule_id"] = rule_id
        if "enabled" in raw:
            if isinstance(raw["enabled"], bool):
                entry["enabled"] = raw["enabled"]
            else:
                problems.append(f"{where}.enabled must be a boolean")
        if "severity" in raw:
            value = raw["severity"]
            severity = _SEVERITIES.get(value) if isinstance(value, str) else None
            if severity is None:
                problems.append(f"{where}.severity must be one of {sorted(_SEVERITIES)}")
            else:
                entry["severity"] = severity
        if "customSettings" in raw:
            if isinstance(raw["customSettings"], dict):
                entry["custom_settings"] = dict(raw["customSettings"])
            else:
                problems.append(f"{where}.customSettings must be an object")
        entries.append(entry)

    if problems:
        raise ConfigValidationError(
            f"Invalid configuration: {len(problems)} problem(s)", problems=problems
        )
    return entries
