"""Lumos role detectors."""

from __future__ import annotations

from flowlint.model.preset import RoleDetectionConfig
from flowlint.roles.detectors import (
    ElementTokenDetector,
    MainDetector,
    SectionDetector,
    WrapperDetector,
    WrapperGates,
)

LUMOS_WRAPPER_GATES = WrapperGates(
    require_direct_parent_container_for_root=True,
    child_group_requires_shared_type_prefix=True,
)

LUMOS_ROLE_DETECTORS = (
    MainDetector(id="lumos-main", names=frozenset({"page_main"})),
    SectionDetector(id="lumos-section", name_prefixes=("section_",)),
    WrapperDetector(id="lumos-wrapper", gates=LUMOS_WRAPPER_GATES),
    ElementTokenDetector(id="lumos-element-token"),
)

LUMOS_ROLE_CONFIG = RoleDetectionConfig(threshold=0.6)
