"""OperatorStore: canonical operator list and editor dialog state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from api.errors import ConsoleError
from constants import MSG_LOAD_FAILED
from model import Operator, OperatorDraft, OperatorId

if TYPE_CHECKING:
    from api.client import OperatorClient
    from controller.notifications import NotificationChannel

log = logging.getLogger(__name__)


class OperatorStore:
    """Single owner of the operator list and the editor session.

    The list is only ever replaced wholesale with the server's response to
    a fetch; it is exposed as a tuple so views cannot mutate it. The editor
    state is a small finite-state container:

    - closed: dialog_open False, editing None, draft None
    - open for create: dialog_open True, editing None, draft empty
    - open for edit: dialog_open True, editing set, draft seeded from it

    Every mutation notifies subscribers so the view can re-render.
    """

    def __init__(self, client: OperatorClient, notifications: NotificationChannel) -> None:
        self.client = client
        self.notifications = notifications
        self._operators: tuple[Operator, ...] = ()
        self._listeners: list[Callable[[], None]] = []
        self.dialog_open = False
        self.editing: Operator | None = None
        self.draft: OperatorDraft | None = None
        self.submitting = False
        self.form_error: str | None = None
        self.loading = False

    @property
    def operators(self) -> tuple[Operator, ...]:
        return self._operators

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a callback run after every state change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    def find(self, operator_id: OperatorId) -> Operator | None:
        for operator in self._operators:
            if operator.id == operator_id:
                return operator
        return None

    # =========================================================================
    # List
    # =========================================================================

    async def load_all(self) -> bool:
        """Replace the list with the server's current one.

        On failure the existing list is kept and an error notification is
        shown. Overlapping calls are not sequenced: the last response to
        arrive wins.

        Returns:
            True if the list was replaced
        """
        self.loading = True
        self._changed()
        try:
            operators = await self.client.list_operators()
        except ConsoleError as e:
            log.warning(f"load_all failed: {e.message}")
            self.loading = False
            self.notifications.error(MSG_LOAD_FAILED)
            self._changed()
            return False
        self._operators = tuple(operators)
        self.loading = False
        log.info(f"Loaded {len(self._operators)} operator(s)")
        self._changed()
        return True

    # =========================================================================
    # Editor session
    # =========================================================================

    def open_editor(self, operator: Operator | None = None) -> OperatorDraft:
        """Open the dialog: empty for create, seeded from operator for edit."""
        self.editing = operator
        if operator is None:
            self.draft = OperatorDraft.empty()
        else:
            self.draft = OperatorDraft.from_operator(operator)
        self.form_error = None
        self.dialog_open = True
        self._changed()
        return self.draft

    def close_editor(self) -> None:
        """Close the dialog and discard the draft."""
        self.dialog_open = False
        self.editing = None
        self.draft = None
        self.form_error = None
        self._changed()

    def update_draft(self, field: str, value: str) -> OperatorDraft:
        """Replace one raw text value in the open draft.

        Raises:
            RuntimeError: If no editor session is open
            KeyError: If the field is not an editable draft field
        """
        if self.draft is None:
            raise RuntimeError("No operator editor is open")
        self.draft = self.draft.with_field(field, value)
        self.form_error = None
        self._changed()
        return self.draft

    def set_form_error(self, message: str | None) -> None:
        self.form_error = message
        self._changed()

    def set_submitting(self, submitting: bool) -> None:
        self.submitting = submitting
        self._changed()
