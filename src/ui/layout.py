"""Operators view composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Label, Static

from ui.widgets import OperatorTable
import ui.ids as ids


def compose_operators_view() -> ComposeResult:
    """Compose the operator list with its toolbar.

    Yields:
        Textual widgets for the operators view
    """
    with Vertical(id=ids.OPERATORS_VIEW):
        with Horizontal(id=ids.HEADER_CONTAINER):
            yield Label("Operators", id=ids.HEADER_TITLE)
            yield Button("Refresh [r]", id=ids.REFRESH_BTN, variant="default")
            yield Button("Add Operator [a]", id=ids.ADD_OPERATOR_BTN, variant="primary")
        yield OperatorTable(id=ids.OPERATOR_TABLE)
        yield Static("No operators configured", id=ids.EMPTY_HINT, classes="hidden")
