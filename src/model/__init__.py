"""Model classes for the operator console."""

from model.operator import Operator, OperatorId, OperatorPayload
from model.draft import DRAFT_FIELDS, FIELD_LABELS, EditorMode, OperatorDraft
from model.notification import Notification, Severity

__all__ = [
    "Operator",
    "OperatorId",
    "OperatorPayload",
    "DRAFT_FIELDS",
    "FIELD_LABELS",
    "EditorMode",
    "OperatorDraft",
    "Notification",
    "Severity",
]
