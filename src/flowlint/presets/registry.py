"""Preset registry and resolution."""

from __future__ import annotations

import logging

from flowlint.errors import PresetResolutionError
from flowlint.model.preset import Preset
from flowlint.presets.client_first import create_client_first_preset
from flowlint.presets.lumos import create_lumos_preset

logger = logging.getLogger("flowlint.presets")

DEFAULT_PRESET_ID = "lumos"


class PresetRegistry:
    """Registered presets, insertion-order stable, latest wins on id collision."""

    def __init__(self, default_id: str = DEFAULT_PRESET_ID) -> None:
        self._presets: dict[str, Preset] = {}
        self._default_id = default_id

    def register(self, preset: Preset) -> None:
        self._presets[preset.id] = preset

    def get(self, preset_id: str) -> Preset | None:
        return self._presets.get(preset_id)

    def ids(self) -> list[str]:
        return list(self._presets)

    def all(self) -> list[Preset]:
        return list(self._presets.values())

    @property
    def default_id(self) -> str:
        """The designated default if registered, else the first registered."""
        if self._default_id in self._presets:
            return self._default_id
        if not self._presets:
            raise PresetResolutionError("No presets registered")
        return next(iter(self._presets))

    def resolve(self, preset_id: str | None = None) -> Preset:
        """Preset for ``preset_id``, falling back to the default.

        Raises PresetResolutionError when nothing is registered.
        """
        if not self._presets:
            raise PresetResolutionError("No presets registered")
        if preset_id is not None and preset_id in self._presets:
            return self._presets[preset_id]
        fallback = self.default_id
        if preset_id is not None:
            logger.warning("Unknown preset %r, falling back to %r", preset_id, fallback)
        return self._presets[fallback]


def default_presets() -> PresetRegistry:
    """Registry holding the built-in presets."""
    registry = PresetRegistry()
    registry.register(create_lumos_preset())
    registry.register(create_client_first_preset())
    return registry
