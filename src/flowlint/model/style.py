"""Style model: a named style definition and its resolved CSS properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StyleInfo:
    """A style (class) definition as reported by the host.

    ``order`` is the position in the list it was read from: site-wide
    order for the style catalogue, applied order for an element's styles.
    """

    id: str
    name: str
    properties: dict[str, Any] = field(default_factory=dict, hash=False)
    order: int = 0
    is_combo: bool = False
    detection_source: str = "heuristic"  # "api" | "heuristic"
