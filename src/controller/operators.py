"""Operator list event handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from textual.css.query import NoMatches
from textual.widgets import Button

from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.store import OperatorStore
    from controller.sync import SyncController
    from model import Operator

log = logging.getLogger(__name__)


class OperatorEventsMixin:
    """Mixin for add/edit/delete/refresh handlers on the operator list."""

    # Expected from App class
    operator_store: OperatorStore
    sync_controller: SyncController
    _query_main: Callable
    push_screen: Callable
    run_worker: Callable
    _set_status: Callable

    def _selected_operator(self) -> Operator | None:
        """Return the store's current entry for the row under the cursor."""
        from ui import OperatorTable

        try:
            table = self._query_main(css(ids.OPERATOR_TABLE), OperatorTable)
        except NoMatches:
            log.debug("Operator table not found")
            return None
        operator_id = table.selected_id()
        if operator_id is None:
            return None
        return self.operator_store.find(operator_id)

    def on_add_operator_pressed(self, event: Button.Pressed) -> None:
        """Open the editor (forwarded from the app)."""
        self.action_add_operator()

    def on_refresh_pressed(self, event: Button.Pressed) -> None:
        """Reload the list (forwarded from the app)."""
        self.action_refresh()

    def action_add_operator(self) -> None:
        """Open the editor in create mode."""
        self._open_editor(None)

    def action_edit_operator(self) -> None:
        """Open the editor seeded from the selected operator."""
        operator = self._selected_operator()
        if operator is None:
            self._set_status("Select an operator to edit")
            return
        self._open_editor(operator)

    def action_delete_operator(self) -> None:
        """Delete the selected operator. No confirmation is asked."""
        if self.operator_store.dialog_open:
            return
        operator = self._selected_operator()
        if operator is None:
            self._set_status("Select an operator to delete")
            return
        self._set_status(f"Deleting {operator.name}...")
        self.run_worker(self.sync_controller.delete(operator.id), group="operator-writes")

    def action_refresh(self) -> None:
        """Re-fetch the operator list."""
        self._set_status("Refreshing...")
        self.run_worker(self.operator_store.load_all(), group="operator-loads")

    def _open_editor(self, operator: Any) -> None:
        from ui.modals import OperatorEditorModal

        if self.operator_store.dialog_open:
            return
        self.operator_store.open_editor(operator)
        self.push_screen(OperatorEditorModal(self.operator_store, self.sync_controller))
