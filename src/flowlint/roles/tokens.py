"""Element-token to role mapping shared by the built-in presets."""

from __future__ import annotations

from typing import Mapping

from flowlint.model.element import ElementRole

BASE_TOKEN_ROLES: dict[str, ElementRole] = {
    "contain": ElementRole.CONTAINER,
    "container": ElementRole.CONTAINER,
    "layout": ElementRole.LAYOUT,
    "content": ElementRole.CONTENT,
    "title": ElementRole.TITLE,
    "heading": ElementRole.TITLE,
    "header": ElementRole.TITLE,
    "text": ElementRole.TEXT,
    "paragraph": ElementRole.TEXT,
    "actions": ElementRole.ACTIONS,
    "buttons": ElementRole.ACTIONS,
    "button": ElementRole.BUTTON,
    "btn": ElementRole.BUTTON,
    "link": ElementRole.LINK,
    "icon": ElementRole.ICON,
    "list": ElementRole.LIST,
    "item": ElementRole.ITEM,
    "li": ElementRole.ITEM,
}

# Roles whose element may parent a component root. Sections are
# deliberately absent: section-prefixed names are never container-like.
CONTAINER_LIKE_ROLES = frozenset({ElementRole.CONTAINER, ElementRole.LAYOUT})

# Tokens that usually name a sub-part of a component rather than its root.
SUBPART_HINTS = frozenset(
    {
        "inner",
        "content",
        "media",
        "image",
        "grid",
        "list",
        "item",
        "header",
        "footer",
        "title",
        "subtitle",
        "copy",
        "desc",
        "description",
        "meta",
        "actions",
        "links",
        "buttons",
        "button",
        "badge",
        "cta",
        "group",
    }
)


def role_for_token(
    token: str | None, token_roles: Mapping[str, ElementRole] = BASE_TOKEN_ROLES
) -> ElementRole | None:
    if not token:
        return None
    return token_roles.get(token.lower())


def is_container_token(
    token: str | None, token_roles: Mapping[str, ElementRole] = BASE_TOKEN_ROLES
) -> bool:
    return role_for_token(token, token_roles) in CONTAINER_LIKE_ROLES
