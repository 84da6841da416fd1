"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
OPERATORS_VIEW = "operators-view"
FOOTER_CONTAINER = "footer-container"
STATUS_BAR = "status-bar"

# Operator list IDs
OPERATOR_TABLE = "operator-table"
ADD_OPERATOR_BTN = "add-operator-btn"
REFRESH_BTN = "refresh-btn"
EMPTY_HINT = "empty-hint"

# Notification
NOTIFICATION_BAR = "notification-bar"

# Operator editor modal IDs
EDITOR_DIALOG = "operator-editor-dialog"
EDITOR_TITLE = "editor-title"
EDITOR_FIELDS = "editor-fields"
EDITOR_ERROR = "editor-error"
EDITOR_BUTTONS = "editor-buttons"
EDITOR_CANCEL_BTN = "editor-cancel-btn"
EDITOR_SAVE_BTN = "editor-save-btn"

# Editor inputs, keyed by draft field
FIELD_INPUTS = {
    "name": "input-name",
    "priority": "input-priority",
    "weight": "input-weight",
    "max_tps": "input-max-tps",
}
