"""Element model: page element snapshots, roles and role detection results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ElementRole(Enum):
    """Structural or semantic purpose inferred for a page element."""

    MAIN = "main"
    SECTION = "section"
    COMPONENT_ROOT = "componentRoot"
    CHILD_GROUP = "childGroup"
    CONTAINER = "container"
    LAYOUT = "layout"
    CONTENT = "content"
    TITLE = "title"
    TEXT = "text"
    ACTIONS = "actions"
    BUTTON = "button"
    LINK = "link"
    ICON = "icon"
    LIST = "list"
    ITEM = "item"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ElementSnapshot:
    """One page element as seen at scan time.

    Snapshots are rebuilt on every scan and never mutated: the page may
    have changed between two scans.
    """

    id: str
    tag_name: str | None = None
    classes: tuple[str, ...] = ()
    parent_id: str | None = None
    children_ids: frozenset[str] = frozenset()
    attributes: dict[str, str] = field(default_factory=dict, hash=False, compare=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ElementSnapshot id must be a non-empty string")

    @property
    def tag(self) -> str:
        """Lower-cased tag name, or an empty string when unknown."""
        return (self.tag_name or "").lower()


@dataclass(frozen=True)
class RoleDetectionResult:
    """A single detector's opinion about an element's role."""

    role: ElementRole
    score: float
    reasoning: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"Role score must be within [0, 1], got {self.score}")
