"""Rule registry, configuration serialization and opinion modes."""

from flowlint.registry.opinion import (
    OPINION_TABLE,
    OpinionMode,
    apply_opinion_mode,
    parse_opinion_mode,
)
from flowlint.registry.registry import RuleRegistry
from flowlint.registry.serialization import (
    CONFIG_VERSION,
    dump_configurations,
    load_configurations,
)

__all__ = [
    "RuleRegistry",
    "OpinionMode",
    "OPINION_TABLE",
    "apply_opinion_mode",
    "parse_opinion_mode",
    "CONFIG_VERSION",
    "dump_configurations",
    "load_configurations",
]
