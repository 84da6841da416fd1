"""UI module containing widgets, styles, and view compositions."""

from ui.widgets import (
    COLUMNS,
    NotificationBar,
    OperatorTable,
)
from ui.layout import compose_operators_view
from ui import ids

__all__ = [
    # Widgets
    "COLUMNS",
    "NotificationBar",
    "OperatorTable",
    # View composers
    "compose_operators_view",
]
