"""Outcomes of a write operation.

Every public write on SyncController returns exactly one of these, so a
caller has to match on the variant instead of catching exceptions.
"""

from dataclasses import dataclass
from enum import Enum

from api.errors import ConsoleError, ValidationError
from model import Operator


class SyncState(Enum):
    """Lifecycle of the most recent write."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Succeeded:
    """The server accepted the write and the list was refreshed."""

    operator: Operator | None = None


@dataclass(frozen=True)
class Failed:
    """The write reached the network and failed."""

    error: ConsoleError


@dataclass(frozen=True)
class Rejected:
    """The draft failed validation; nothing was sent."""

    error: ValidationError


@dataclass(frozen=True)
class Ignored:
    """A matching write was already in flight; nothing was sent."""

    reason: str


WriteResult = Succeeded | Failed | Rejected | Ignored
