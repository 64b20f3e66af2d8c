"""Linter configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LinterConfig:
    preset: str = "lumos"
    opinion_mode: str = "balanced"  # strict | balanced | lenient
    role_threshold: float | None = None  # overrides the preset threshold
    ignore_third_party: bool = True
    structural_element_scan: bool = False
