"""Rule result model: violations produced by a scan."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for a rule violation."""

    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class QuickFix:
    """A mechanical fix the UI may offer for a violation.

    ``rename-class`` uses ``from_name``/``to_name``; ``add-class`` uses
    ``to_name``; ``reorder-classes`` uses ``order``.
    """

    kind: str
    scope: str = "element"  # element | global
    from_name: str | None = None
    to_name: str | None = None
    order: tuple[str, ...] = ()

    @classmethod
    def rename(cls, from_name: str, to_name: str, scope: str = "element") -> QuickFix:
        return cls(kind="rename-class", scope=scope, from_name=from_name, to_name=to_name)

    @classmethod
    def add(cls, class_name: str) -> QuickFix:
        return cls(kind="add-class", to_name=class_name)

    @classmethod
    def reorder(cls, order: list[str]) -> QuickFix:
        return cls(kind="reorder-classes", order=tuple(order))


@dataclass(frozen=True)
class RuleResult:
    """A single violation reported by a rule.

    Attributes:
        rule_id: Identifier of the rule that produced the violation.
        name: Human-readable rule name.
        message: Description of the problem.
        severity: Graded severity chosen by the rule, or ``None`` to take
            the rule's configured severity.
        class_name: The offending class, empty for element/page findings.
        is_combo: Whether the offending class sits in a combo position.
        element_id: The element involved, if any.
        combo_index: Position among the element's combo classes.
        example: Example of a compliant name.
        metadata: Extra structured data for presentation.
        fix: Suggested mechanical fix, if any.
    """

    rule_id: str
    name: str
    message: str
    severity: Severity | None = None
    class_name: str = ""
    is_combo: bool = False
    element_id: str | None = None
    combo_index: int | None = None
    example: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict, hash=False)
    fix: QuickFix | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible representation."""
        data: dict[str, Any] = {
            "ruleId": self.rule_id,
            "name": self.name,
            "message": self.message,
            "severity": self.severity.value if self.severity else None,
            "className": self.class_name,
            "isCombo": self.is_combo,
        }
        if self.element_id is not None:
            data["elementId"] = self.element_id
        if self.combo_index is not None:
            data["comboIndex"] = self.combo_index
        if self.example:
            data["example"] = self.example
        if self.metadata:
            data["metadata"] = {
                k: (v.value if isinstance(v, Enum) else v) for k, v in self.metadata.items()
            }
        if self.fix is not None:
            fix: dict[str, Any] = {"kind": self.fix.kind, "scope": self.fix.scope}
            if self.fix.from_name is not None:
                fix["from"] = self.fix.from_name
                fix["to"] = self.fix.to_name
            elif self.fix.to_name is not None:
                fix["className"] = self.fix.to_name
            if self.fix.order:
                fix["order"] = list(self.fix.order)
            data["fix"] = fix
        return data

    def __str__(self) -> str:
        level = self.severity.value.upper() if self.severity else "UNSET"
        location = ""
        if self.element_id and self.class_name:
            location = f" [element={self.element_id} class={self.class_name}]"
        elif self.element_id:
            location = f" [element={self.element_id}]"
        elif self.class_name:
            location = f" [class={self.class_name}]"
        return f"{level}{location} {self.rule_id}: {self.message}"
