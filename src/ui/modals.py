"""Modal dialog for creating and editing operators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from controller.validators import is_submittable
from model import DRAFT_FIELDS, FIELD_LABELS
from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from controller.store import OperatorStore
    from controller.sync import SyncController

# Input id -> draft field
_INPUT_FIELDS = {input_id: field for field, input_id in ids.FIELD_INPUTS.items()}

_NUMERIC_FIELDS = {"priority", "weight", "max_tps"}


class OperatorEditorModal(ModalScreen[None]):
    """Create/edit dialog bound to the store's editor session.

    The dialog never holds its own copy of the draft: every keystroke goes
    to store.update_draft(), and the screen closes itself when the store
    reports the session closed (cancel, or a successful save).
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, store: OperatorStore, controller: SyncController) -> None:
        super().__init__()
        self.store = store
        self.controller = controller
        self._unsubscribe: Callable[[], None] | None = None
        self._dismissing = False

    def compose(self) -> ComposeResult:
        draft = self.store.draft
        values = draft.values() if draft is not None else {}
        title = "Edit Operator" if self.store.editing is not None else "Add Operator"
        with Vertical(id=ids.EDITOR_DIALOG):
            yield Label(title, id=ids.EDITOR_TITLE)
            with VerticalScroll(id=ids.EDITOR_FIELDS):
                for field in DRAFT_FIELDS:
                    yield Label(FIELD_LABELS[field], classes="field-label")
                    yield Input(
                        value=values.get(field, ""),
                        placeholder=FIELD_LABELS[field],
                        type="integer" if field in _NUMERIC_FIELDS else "text",
                        id=ids.FIELD_INPUTS[field],
                    )
            yield Static("", id=ids.EDITOR_ERROR)
            with Horizontal(id=ids.EDITOR_BUTTONS):
                yield Button("Cancel", id=ids.EDITOR_CANCEL_BTN, variant="default")
                yield Button("Save", id=ids.EDITOR_SAVE_BTN, variant="success")

    def on_mount(self) -> None:
        self._unsubscribe = self.store.subscribe(self._on_store_changed)
        self._refresh_controls()
        self.query_one(css(ids.FIELD_INPUTS["name"]), Input).focus()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_store_changed(self) -> None:
        if not self.store.dialog_open:
            self._close()
            return
        self._refresh_controls()

    def _refresh_controls(self) -> None:
        draft = self.store.draft
        save_btn = self.query_one(css(ids.EDITOR_SAVE_BTN), Button)
        save_btn.disabled = (
            draft is None or self.store.submitting or not is_submittable(draft)
        )
        save_btn.label = "Saving..." if self.store.submitting else "Save"
        error = self.query_one(css(ids.EDITOR_ERROR), Static)
        error.update(self.store.form_error or "")

    def _close(self) -> None:
        if self._dismissing:
            return
        self._dismissing = True
        self.dismiss(None)

    @on(Input.Changed)
    def on_input_changed(self, event: Input.Changed) -> None:
        field = _INPUT_FIELDS.get(event.input.id or "")
        if field is None or self.store.draft is None:
            return
        if getattr(self.store.draft, field) != event.value:
            self.store.update_draft(field, event.value)

    @on(Input.Submitted)
    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_save()

    @on(Button.Pressed, css(ids.EDITOR_SAVE_BTN))
    def on_save_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_save()

    @on(Button.Pressed, css(ids.EDITOR_CANCEL_BTN))
    def on_cancel_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_cancel()

    def action_save(self) -> None:
        """Dispatch the draft. Duplicate presses are dropped by the controller."""
        if self.store.submitting:
            return
        self.app.run_worker(self.controller.submit(), group="operator-writes")

    def action_cancel(self) -> None:
        self.store.close_editor()
