"""NotificationChannel: single-slot toast with auto-dismiss."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from constants import NOTIFICATION_TIMEOUT
from model import Notification, Severity

log = logging.getLogger(__name__)

Listener = Callable[[Notification | None], None]


class NotificationChannel:
    """Holds at most one visible notification.

    Showing a notification replaces whatever is visible and restarts the
    dismiss timer. The timer runs on the current asyncio loop, so show()
    must be called from within the running loop (the Textual app's loop,
    or an async test).
    """

    def __init__(self, timeout: float = NOTIFICATION_TIMEOUT) -> None:
        self.timeout = timeout
        self._current: Notification | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._listeners: list[Listener] = []

    @property
    def current(self) -> Notification | None:
        return self._current

    @property
    def visible(self) -> bool:
        return self._current is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run with the new slot value on every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def show(self, message: str, severity: Severity = Severity.INFO) -> Notification:
        """Show a notification, replacing any visible one."""
        self._cancel_timer()
        notification = Notification(message=message, severity=severity)
        self._current = notification
        log.info(f"notify[{severity.value}]: {message}")
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.timeout, self._expire, notification)
        self._emit()
        return notification

    def success(self, message: str) -> Notification:
        return self.show(message, Severity.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.show(message, Severity.ERROR)

    def warning(self, message: str) -> Notification:
        return self.show(message, Severity.WARNING)

    def info(self, message: str) -> Notification:
        return self.show(message, Severity.INFO)

    def dismiss(self) -> None:
        """Clear the slot (explicit user action)."""
        self._cancel_timer()
        if self._current is None:
            return
        self._current = None
        self._emit()

    def _expire(self, notification: Notification) -> None:
        self._timer = None
        # A newer notification owns the slot; its own timer will clear it
        if self._current is not notification:
            return
        self._current = None
        self._emit()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self._current)
