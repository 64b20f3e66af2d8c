"""Linter facade: the active preset, opinion mode, rule registry and style cache.

Switching preset or opinion mode builds a complete new state and swaps it
in with a single assignment; scans already running keep the state they
started with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping

from flowlint.adapters.base import Host
from flowlint.config import LinterConfig
from flowlint.engine.scan import ElementScanResult, PageScanResult, Scanner, watch_selection
from flowlint.events.bus import EventBus
from flowlint.events.types import OpinionModeChanged, PresetChanged
from flowlint.model.preset import Preset
from flowlint.model.result import Severity
from flowlint.model.rule import RuleConfiguration
from flowlint.presets.registry import PresetRegistry, default_presets
from flowlint.registry.opinion import OpinionMode, apply_opinion_mode, parse_opinion_mode
from flowlint.registry.registry import RuleRegistry
from flowlint.registry.serialization import load_configurations
from flowlint.styles.cache import StyleCache
from flowlint.styles.service import StyleService

logger = logging.getLogger("flowlint")


@dataclass(frozen=True)
class ActiveState:
    preset: Preset
    mode: OpinionMode
    registry: RuleRegistry
    scanner: Scanner


class Linter:
    """Entry point for scanning pages and managing rule configuration."""

    def __init__(
        self,
        config: LinterConfig | None = None,
        *,
        presets: PresetRegistry | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.config = config or LinterConfig()
        self.presets = presets if presets is not None else default_presets()
        self.bus = bus or EventBus()
        self.cache = StyleCache(self.bus)
        self._overrides: dict[str, dict[str, Any]] = {}
        mode = parse_opinion_mode(self.config.opinion_mode)
        self._state = self._build_state(self.presets.resolve(self.config.preset), mode)

    # -- state --------------------------------------------------------------

    def _build_state(self, preset: Preset, mode: OpinionMode) -> ActiveState:
        registry = RuleRegistry(preset.rules)
        apply_opinion_mode(registry, mode)
        for rule_id, override in self._overrides.items():
            if rule_id in registry:
                registry.update_rule_configuration(rule_id, **override)
        scanner = Scanner(
            preset,
            registry,
            StyleService(self.cache, combo_pattern=preset.grammar.combo_pattern),
            bus=self.bus,
            role_threshold=self.config.role_threshold,
            ignore_third_party=self.config.ignore_third_party,
        )
        return ActiveState(preset=preset, mode=mode, registry=registry, scanner=scanner)

    @property
    def preset(self) -> Preset:
        return self._state.preset

    @property
    def opinion_mode(self) -> OpinionMode:
        return self._state.mode

    @property
    def registry(self) -> RuleRegistry:
        return self._state.registry

    def set_preset(self, preset_id: str) -> Preset:
        previous = self._state.preset
        preset = self.presets.resolve(preset_id)
        if preset.id == previous.id:
            return preset
        self._state = self._build_state(preset, self._state.mode)
        logger.info("Preset changed: %s -> %s", previous.id, preset.id)
        self.cache.reset("preset-change")
        self.bus.emit(PresetChanged(previous_id=previous.id, preset_id=preset.id))
        return preset

    def set_opinion_mode(self, mode: str | OpinionMode) -> OpinionMode:
        new_mode = parse_opinion_mode(mode)
        previous = self._state.mode
        if new_mode is previous:
            return new_mode
        # Rebuild from rule defaults so leaving a mode undoes its remaps.
        self._state = self._build_state(self._state.preset, new_mode)
        logger.info("Opinion mode changed: %s -> %s", previous.value, new_mode.value)
        self.cache.reset("opinion-mode-change")
        self.bus.emit(OpinionModeChanged(previous=previous.value, mode=new_mode.value))
        return new_mode

    # -- rule configuration -------------------------------------------------

    def update_rule_configuration(
        self,
        rule_id: str,
        *,
        enabled: bool | None = None,
        severity: Severity | None = None,
        custom_settings: Mapping[str, Any] | None = None,
    ) -> RuleConfiguration:
        """Override one rule; the override survives preset and mode changes."""
        config = self._state.registry.update_rule_configuration(
            rule_id, enabled=enabled, severity=severity, custom_settings=custom_settings
        )
        override = self._overrides.setdefault(rule_id, {})
        if enabled is not None:
            override["enabled"] = enabled
        if severity is not None:
            override["severity"] = severity
        if custom_settings:
            override.setdefault("custom_settings", {}).update(custom_settings)
        return config

    def export_configuration(self) -> str:
        return self._state.registry.export_json()

    def import_configuration(self, text: str) -> list[str]:
        """Apply a configuration document to the active registry.

        Raises ConfigValidationError without changing anything when the
        document is invalid.
        """
        entries = load_configurations(text)
        applied: list[str] = []
        for entry in entries:
            rule_id = entry["rule_id"]
            if rule_id not in self._state.registry:
                logger.info("Skipping configuration for unknown rule %s", rule_id)
                continue
            self.update_rule_configuration(
                rule_id,
                enabled=entry.get("enabled"),
                severity=entry.get("severity"),
                custom_settings=entry.get("custom_settings"),
            )
            applied.append(rule_id)
        return applied

    # -- scanning -----------------------------------------------------------

    async def scan_page(self, host: Host) -> PageScanResult:
        return await self._state.scanner.scan_page(host)

    async def scan_element(
        self, host: Host, element_id: str, *, structural: bool | None = None
    ) -> ElementScanResult:
        if structural is None:
            structural = self.config.structural_element_scan
        return await self._state.scanner.scan_element(host, element_id, structural=structural)

    def watch_selection(
        self,
        host: Host,
        callback: Callable[[ElementScanResult], Awaitable[None] | None],
    ) -> Callable[[], None]:
        return watch_selection(
            host, self, callback, structural=self.config.structural_element_scan
        )
