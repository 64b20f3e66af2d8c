"""Client-First role detectors."""

from __future__ import annotations

from flowlint.model.element import ElementRole
from flowlint.model.preset import RoleDetectionConfig
from flowlint.roles.detectors import (
    ElementTokenDetector,
    MainDetector,
    SectionDetector,
    WrapperDetector,
    WrapperGates,
)
from flowlint.roles.tokens import BASE_TOKEN_ROLES

# container-large, padding-global and friends end in a size token once the
# grammar splits on dashes.
CLIENT_FIRST_TOKEN_ROLES = {
    **BASE_TOKEN_ROLES,
    "large": ElementRole.CONTAINER,
    "medium": ElementRole.CONTAINER,
    "small": ElementRole.CONTAINER,
    "global": ElementRole.CONTAINER,
}

CLIENT_FIRST_WRAPPER_GATES = WrapperGates(
    require_direct_parent_container_for_root=False,
    child_group_requires_shared_type_prefix=False,
)

CLIENT_FIRST_ROLE_DETECTORS = (
    MainDetector(
        id="client-first-main",
        names=frozenset({"main-wrapper"}),
        name_prefixes=("main_",),
    ),
    SectionDetector(
        id="client-first-section",
        name_prefixes=("section_", "section-"),
        utility_names=frozenset({"u-section"}),
        token_roles=CLIENT_FIRST_TOKEN_ROLES,
    ),
    WrapperDetector(
        id="client-first-wrapper",
        gates=CLIENT_FIRST_WRAPPER_GATES,
        token_roles=CLIENT_FIRST_TOKEN_ROLES,
    ),
    ElementTokenDetector(id="client-first-element-token", token_roles=CLIENT_FIRST_TOKEN_ROLES),
)

CLIENT_FIRST_ROLE_CONFIG = RoleDetectionConfig(threshold=0.6)
