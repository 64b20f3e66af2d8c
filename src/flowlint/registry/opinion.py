"""Opinion modes: fixed severity remaps applied on top of rule defaults."""

from __future__ import annotations

import logging
from enum import Enum

from flowlint.model.result import Severity
from flowlint.registry.registry import RuleRegistry

logger = logging.getLogger("flowlint.registry")


class OpinionMode(Enum):
    STRICT = "strict"
    BALANCED = "balanced"
    LENIENT = "lenient"


OPINION_TABLE: dict[OpinionMode, dict[str, Severity]] = {
    OpinionMode.STRICT: {
        "lumos:naming:combo-class-format": Severity.ERROR,
        "cf:naming:variant-is-prefix": Severity.ERROR,
        "canonical:component-root-structure": Severity.ERROR,
        "canonical:main-children": Severity.ERROR,
    },
    OpinionMode.BALANCED: {},
    OpinionMode.LENIENT: {
        "canonical:childgroup-key-match": Severity.SUGGESTION,
        "lumos:composition:combo-limit": Severity.SUGGESTION,
        "canonical:section-parent-is-main": Severity.SUGGESTION,
    },
}


def parse_opinion_mode(value: str | OpinionMode) -> OpinionMode:
    if isinstance(value, OpinionMode):
        return value
    try:
        return OpinionMode(value.lower())
    except ValueError:
        valid = ", ".join(m.value for m in OpinionMode)
        raise ValueError(f"Unknown opinion mode {value!r} (expected one of: {valid})") from None


def apply_opinion_mode(registry: RuleRegistry, mode: OpinionMode) -> list[str]:
    """Remap severities for ``mode``; returns the rule ids touched.

    Idempotent. ``BALANCED`` changes nothing and does not undo an earlier
    mode; rebuild the registry to get defaults back.
    """
    touched: list[str] = []
    for rule_id, severity in OPINION_TABLE[mode].items():
        if rule_id in registry:
            registry.update_rule_configuration(rule_id, severity=severity)
            touched.append(rule_id)
    logger.debug("Applied opinion mode %s to %d rules", mode.value, len(touched))
    return touched
