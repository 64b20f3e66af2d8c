"""Event system: bus and linter lifecycle event types."""

from flowlint.events.bus import EventBus
from flowlint.events.types import (
    OpinionModeChanged,
    PresetChanged,
    RuleFailed,
    ScanCompleted,
    ScanStarted,
    StyleCacheInvalidated,
)

__all__ = [
    "EventBus",
    "OpinionModeChanged",
    "PresetChanged",
    "RuleFailed",
    "ScanCompleted",
    "ScanStarted",
    "StyleCacheInvalidated",
]
