"""Class-name normalization used by rename fixes.

Every function here is idempotent: feeding its output back in returns the
same value.
"""

from __future__ import annotations

import re

UTILITY_FORMAT = re.compile(r"^u-[a-z0-9]+(?:-[a-z0-9]+)*$")
VARIANT_FORMAT = re.compile(r"^is-[a-z0-9]+(?:-[a-z0-9]+)*$")


def to_hyphen_format(value: str) -> str:
    """Lowercase, hyphen-separated, only ``[a-z0-9-]``."""
    value = value.strip().lower()
    value = re.sub(r"[\s_]+", "-", value)
    value = re.sub(r"[^a-z0-9-]", "", value)
    value = re.sub(r"-{2,}", "-", value)
    return value.strip("-")


def to_underscore_format(value: str) -> str:
    """Lowercase, underscore-separated, only ``[a-z0-9_]``."""
    value = value.strip().lower()
    value = re.sub(r"[\s-]+", "_", value)
    value = re.sub(r"[^a-z0-9_]", "", value)
    value = re.sub(r"_{2,}", "_", value)
    return value.strip("_")


def _normalize_prefixed(name: str, prefix: str, fmt: re.Pattern[str]) -> str | None:
    body = to_hyphen_format(re.sub(rf"^{prefix}[_-]?", "", name, flags=re.IGNORECASE))
    if not body:
        return None
    candidate = f"{prefix}-{body}"
    return candidate if fmt.match(candidate) else None


def normalize_utility_class(name: str) -> str | None:
    """``u_Margin_Top`` -> ``u-margin-top``; None when nothing usable remains."""
    return _normalize_prefixed(name, "u", UTILITY_FORMAT)


def normalize_variant_class(name: str) -> str | None:
    """``is_Active`` / ``isActive`` -> ``is-active``; None when nothing usable remains."""
    return _normalize_prefixed(name, "is", VARIANT_FORMAT)
