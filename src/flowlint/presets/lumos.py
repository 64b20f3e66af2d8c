"""Lumos preset: underscore grammar, Lumos detectors, canonical + Lumos rules."""

from __future__ import annotations

from flowlint.grammar.lumos import LUMOS_GRAMMAR
from flowlint.model.preset import Preset
from flowlint.roles.lumos import LUMOS_ROLE_CONFIG, LUMOS_ROLE_DETECTORS
from flowlint.rules.canonical import canonical_rules
from flowlint.rules.lumos import lumos_rules


def create_lumos_preset() -> Preset:
    return Preset(
        id="lumos",
        name="Lumos",
        description="Lumos naming: type_variant_element customs, is- variants, u- utilities.",
        grammar=LUMOS_GRAMMAR,
        role_detectors=LUMOS_ROLE_DETECTORS,
        role_detection_config=LUMOS_ROLE_CONFIG,
        rules=tuple(lumos_rules() + canonical_rules()),
    )
