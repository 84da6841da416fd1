"""Editor draft model: the raw text form of an operator being edited."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from model.operator import Operator, OperatorId

# Editable fields, in dialog order
DRAFT_FIELDS = ("name", "priority", "weight", "max_tps")

FIELD_LABELS = {
    "name": "Name",
    "priority": "Priority",
    "weight": "Weight",
    "max_tps": "Max TPS",
}


class EditorMode(Enum):
    """Whether the dialog creates a new operator or edits an existing one."""

    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True)
class OperatorDraft:
    """Unvalidated dialog state.

    Values stay as text until submission so the user can pass through
    invalid intermediate states (an empty priority, a lone "-").
    """

    name: str = ""
    priority: str = ""
    weight: str = ""
    max_tps: str = ""
    mode: EditorMode = EditorMode.CREATE
    target_id: OperatorId | None = None

    @classmethod
    def empty(cls) -> OperatorDraft:
        return cls()

    @classmethod
    def from_operator(cls, operator: Operator) -> OperatorDraft:
        """Seed an edit draft with the operator's current values as text."""
        return cls(
            name=operator.name,
            priority=str(operator.priority),
            weight=str(operator.weight),
            max_tps=str(operator.max_tps),
            mode=EditorMode.EDIT,
            target_id=operator.id,
        )

    def with_field(self, field: str, value: str) -> OperatorDraft:
        if field not in DRAFT_FIELDS:
            raise KeyError(f"Unknown draft field: {field}")
        return replace(self, **{field: value})

    def values(self) -> dict[str, str]:
        return {field: getattr(self, field) for field in DRAFT_FIELDS}
