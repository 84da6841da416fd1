"""Operator resource model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

OperatorId = int | str

# Fields the server must echo for every operator
REQUIRED_FIELDS = ("name", "priority", "weight", "maxTps")


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Operator:
    """A downstream messaging carrier as reported by the server."""

    id: OperatorId | None
    name: str
    priority: int
    weight: int
    max_tps: int
    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Operator:
        """Build an Operator from a decoded JSON object.

        Raises:
            ValueError: If the object is missing fields or has the wrong types
        """
        if not isinstance(data, dict):
            raise ValueError(f"Operator must be a JSON object, got {type(data).__name__}")
        missing = [key for key in REQUIRED_FIELDS if key not in data]
        if missing:
            raise ValueError(f"Operator missing fields: {', '.join(missing)}")
        name = data["name"]
        if not isinstance(name, str):
            raise ValueError(f"name must be a string, got {name!r}")
        status = data.get("status")
        return cls(
            id=data.get("id"),
            name=name,
            priority=_require_int(data, "priority"),
            weight=_require_int(data, "weight"),
            max_tps=_require_int(data, "maxTps"),
            status="" if status is None else str(status),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the server's field names."""
        return {
            "id": self.id,
            "name": self.name,
            "priority": self.priority,
            "weight": self.weight,
            "maxTps": self.max_tps,
            "status": self.status,
        }


@dataclass(frozen=True)
class OperatorPayload:
    """Coerced create/update request body."""

    name: str
    priority: int
    weight: int
    max_tps: int

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "priority": self.priority,
            "weight": self.weight,
            "maxTps": self.max_tps,
        }
