"""SyncController: write round-trips against the operator API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.errors import ConsoleError, ValidationError
from constants import (
    MSG_DELETE_FAILED,
    MSG_OPERATOR_ADDED,
    MSG_OPERATOR_DELETED,
    MSG_OPERATOR_UPDATED,
    MSG_SAVE_FAILED,
)
from controller.results import Failed, Ignored, Rejected, Succeeded, SyncState, WriteResult
from controller.validators import validate_draft
from model import EditorMode, OperatorDraft, OperatorId

if TYPE_CHECKING:
    from api.client import OperatorClient
    from controller.notifications import NotificationChannel
    from controller.store import OperatorStore

log = logging.getLogger(__name__)


class SyncController:
    """Orchestrates create/update/delete and the refresh that follows each.

    Each write moves IDLE -> SUBMITTING -> SUCCEEDED | FAILED. ``state``
    follows the most recent write to change it, so with a save and a delete
    in flight it shows whichever moved last; the outcome of a particular
    write is the result it returns. The list refresh is awaited only after
    the write's response has been observed, and every write triggers its
    own refresh; writes are never coalesced or retried.

    Create and update share one in-flight slot (the store's ``submitting``
    flag): a save issued while another is pending is ignored. Deletes are
    tracked per id.

    No exception leaves this class. Validation failures land in the store's
    form_error; every other failure ends in an error notification.

    Example usage:
        store.open_editor()
        store.update_draft("name", "Carrier A")
        ...
        result = await controller.submit()
        if isinstance(result, Failed):
            ...
    """

    def __init__(
        self,
        store: OperatorStore,
        client: OperatorClient,
        notifications: NotificationChannel,
    ) -> None:
        self.store = store
        self.client = client
        self.notifications = notifications
        self.state = SyncState.IDLE
        self._deleting: set[OperatorId] = set()

    async def submit(self) -> WriteResult:
        """Save the store's open draft, as a create or an update."""
        draft = self.store.draft
        if draft is None:
            return Ignored("no editor is open")
        if draft.mode is EditorMode.EDIT:
            return await self.update(draft.target_id, draft)
        return await self.create(draft)

    async def create(self, draft: OperatorDraft) -> WriteResult:
        return await self._save(draft, None, MSG_OPERATOR_ADDED)

    async def update(self, operator_id: OperatorId | None, draft: OperatorDraft) -> WriteResult:
        if operator_id is None:
            return self._reject(ValidationError("id", "Operator id required"))
        return await self._save(draft, operator_id, MSG_OPERATOR_UPDATED)

    async def delete(self, operator_id: OperatorId) -> WriteResult:
        """Delete an operator, then refresh the list. There is no undo."""
        if operator_id in self._deleting:
            return Ignored(f"delete of {operator_id} already in flight")
        self._deleting.add(operator_id)
        self.state = SyncState.SUBMITTING
        try:
            await self.client.delete_operator(operator_id)
        except ConsoleError as e:
            log.warning(f"Delete of operator {operator_id} failed: {e.message}")
            self.state = SyncState.FAILED
            self.notifications.error(MSG_DELETE_FAILED)
            return Failed(e)
        finally:
            self._deleting.discard(operator_id)

        log.info(f"Deleted operator {operator_id}")
        self.state = SyncState.SUCCEEDED
        self.notifications.success(MSG_OPERATOR_DELETED)
        await self.store.load_all()
        return Succeeded()

    async def _save(
        self,
        draft: OperatorDraft,
        operator_id: OperatorId | None,
        success_message: str,
    ) -> WriteResult:
        if self.store.submitting:
            return Ignored("a save is already in flight")
        try:
            payload = validate_draft(draft)
        except ValidationError as e:
            return self._reject(e)

        self.state = SyncState.SUBMITTING
        self.store.set_submitting(True)
        try:
            if operator_id is None:
                operator = await self.client.create_operator(payload)
            else:
                operator = await self.client.update_operator(operator_id, payload)
        except ConsoleError as e:
            log.warning(f"Save of operator {payload.name!r} failed: {e.message}")
            self.state = SyncState.FAILED
            self.notifications.error(e.message or MSG_SAVE_FAILED)
            return Failed(e)
        finally:
            self.store.set_submitting(False)

        log.info(f"Saved operator {payload.name!r}")
        self.state = SyncState.SUCCEEDED
        self.store.close_editor()
        self.notifications.success(success_message)
        await self.store.load_all()
        return Succeeded(operator)

    def _reject(self, error: ValidationError) -> Rejected:
        log.debug(f"Draft rejected: {error.field}: {error.message}")
        self.store.set_form_error(error.message)
        return Rejected(error)
