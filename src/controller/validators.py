"""Validation and coercion of operator drafts before submission."""

import re

from api.errors import ValidationError
from model import FIELD_LABELS, OperatorDraft, OperatorPayload

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


def validate_name(value: str) -> str:
    """Validate the operator name.

    Args:
        value: String value from input field

    Returns:
        Stripped name

    Raises:
        ValidationError: If the name is empty or whitespace only
    """
    stripped = value.strip()
    if not stripped:
        raise ValidationError("name", "Name required")
    return stripped


def parse_int_field(field: str, value: str) -> int:
    """Parse a numeric draft field as an integer.

    Only plain decimal literals are accepted: an optional sign followed by
    digits, with surrounding whitespace ignored. "1.5", "1e3" and "1_000"
    are rejected.

    Args:
        field: Draft field name (used for the error label)
        value: String value from input field

    Returns:
        Parsed integer

    Raises:
        ValidationError: If the value is empty or not an integer
    """
    label = FIELD_LABELS.get(field, field)
    stripped = value.strip()
    if not stripped:
        raise ValidationError(field, f"{label} required")
    if not _INT_PATTERN.match(stripped):
        raise ValidationError(field, f"{label} must be an integer")
    return int(stripped)


def validate_max_tps(value: str) -> int:
    """Parse Max TPS, which is a ceiling and so cannot be negative."""
    num = parse_int_field("max_tps", value)
    if num < 0:
        raise ValidationError("max_tps", "Max TPS must be zero or greater")
    return num


def validate_draft(draft: OperatorDraft) -> OperatorPayload:
    """Coerce a draft into a request payload.

    Fields are checked in dialog order and the first failure is raised.

    Raises:
        ValidationError: If any field is missing or malformed
    """
    return OperatorPayload(
        name=validate_name(draft.name),
        priority=parse_int_field("priority", draft.priority),
        weight=parse_int_field("weight", draft.weight),
        max_tps=validate_max_tps(draft.max_tps),
    )


def is_submittable(draft: OperatorDraft) -> bool:
    """Check whether the draft would pass validation (drives the Save button)."""
    try:
        validate_draft(draft)
    except ValidationError:
        return False
    return True
