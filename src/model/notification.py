"""Notification model for the feedback toast."""

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Presentation level of a notification. Does not affect dismissal."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """A single toast message."""

    message: str
    severity: Severity = Severity.INFO
