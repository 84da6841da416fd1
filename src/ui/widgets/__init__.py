"""Custom Textual widgets for the operator console.

This package contains all custom widgets organized by domain.
"""

from ui.widgets.operators import COLUMNS, OperatorTable
from ui.widgets.notification import NotificationBar

__all__ = [
    "COLUMNS",
    "NotificationBar",
    "OperatorTable",
]
