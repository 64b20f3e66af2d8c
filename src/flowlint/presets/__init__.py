"""Built-in presets and preset resolution."""

from flowlint.presets.client_first import create_client_first_preset
from flowlint.presets.lumos import create_lumos_preset
from flowlint.presets.registry import DEFAULT_PRESET_ID, PresetRegistry, default_presets

__all__ = [
    "PresetRegistry",
    "DEFAULT_PRESET_ID",
    "default_presets",
    "create_lumos_preset",
    "create_client_first_preset",
]
