"""Notification widget: NotificationBar."""

from typing import Callable

from textual.widgets import Static

from model import Notification, Severity


class NotificationBar(Static):
    """Renders the single notification slot. Click to dismiss."""

    def __init__(self, on_dismiss: Callable[[], None], **kwargs) -> None:
        super().__init__("", **kwargs)
        self._on_dismiss = on_dismiss
        self.add_class("hidden")

    def show_notification(self, notification: Notification | None) -> None:
        for severity in Severity:
            self.remove_class(f"severity-{severity.value}")
        if notification is None:
            self.update("")
            self.add_class("hidden")
            return
        self.update(notification.message)
        self.add_class(f"severity-{notification.severity.value}")
        self.remove_class("hidden")

    def on_click(self) -> None:
        self._on_dismiss()
