"""Controller layer: mediates between the remote API, state and UI widgets.

This package contains:
- validators: draft validation and coercion
- notifications: NotificationChannel single-slot toast
- store: OperatorStore canonical list and editor session
- sync: SyncController write round-trips
- Event handler mixins for the operator list
"""

from controller.notifications import NotificationChannel
from controller.results import Failed, Ignored, Rejected, Succeeded, SyncState, WriteResult
from controller.store import OperatorStore
from controller.sync import SyncController
from controller.operators import OperatorEventsMixin

__all__ = [
    # State
    "NotificationChannel",
    "OperatorStore",
    # Sync
    "SyncController",
    "SyncState",
    "WriteResult",
    "Succeeded",
    "Failed",
    "Rejected",
    "Ignored",
    # Event mixins
    "OperatorEventsMixin",
]
