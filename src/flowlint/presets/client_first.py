"""Client-First preset: kebab folders, strict is- combos, Client-First rules."""

from __future__ import annotations

from flowlint.grammar.client_first import CLIENT_FIRST_GRAMMAR
from flowlint.model.preset import Preset
from flowlint.roles.client_first import CLIENT_FIRST_ROLE_CONFIG, CLIENT_FIRST_ROLE_DETECTORS
from flowlint.rules.canonical import canonical_rules
from flowlint.rules.client_first import client_first_rules


def create_client_first_preset() -> Preset:
    return Preset(
        id="client-first",
        name="Client-First",
        description="Finsweet Client-First: folder_element-name customs, is- combos.",
        grammar=CLIENT_FIRST_GRAMMAR,
        role_detectors=CLIENT_FIRST_ROLE_DETECTORS,
        role_detection_config=CLIENT_FIRST_ROLE_CONFIG,
        rules=tuple(client_first_rules() + canonical_rules()),
    )
