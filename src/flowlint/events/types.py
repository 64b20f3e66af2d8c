"""Event types emitted by the linter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanStarted:
    scope: str  # "page" | "element"
    preset_id: str
    element_id: str | None = None


@dataclass(frozen=True)
class ScanCompleted:
    scope: str
    preset_id: str
    violation_count: int
    element_count: int
    element_id: str | None = None


@dataclass(frozen=True)
class RuleFailed:
    rule_id: str
    error: str
    class_name: str | None = None
    element_id: str | None = None


@dataclass(frozen=True)
class PresetChanged:
    previous_id: str | None
    preset_id: str


@dataclass(frozen=True)
class OpinionModeChanged:
    previous: str
    mode: str


@dataclass(frozen=True)
class StyleCacheInvalidated:
    reason: str
    had_value: bool = False
