"""Main TUI application for the operator console."""

import logging
from pathlib import Path
from typing import Any

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Button, Footer, Static

from api import OperatorClient
from config import ConsoleConfig, get_log_path
from controller import (
    NotificationChannel,
    OperatorEventsMixin,
    OperatorStore,
    SyncController,
)
from model import Notification
from ui import NotificationBar, OperatorTable, compose_operators_view
from ui.ids import css
import ui.ids as ids

logging.basicConfig(
    filename=str(get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class SmscConsoleApp(OperatorEventsMixin, App):
    """TUI for managing the gateway's messaging operators."""

    TITLE = "SMSC Console"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("a", "add_operator", "Add", show=True),
        Binding("e", "edit_operator", "Edit", show=True),
        Binding("d", "delete_operator", "Delete", show=True),
        Binding("r", "refresh", "Refresh", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: ConsoleConfig | None = None,
        client: OperatorClient | None = None,
        notification_timeout: float | None = None,
        version: str = "0.0",
    ) -> None:
        super().__init__()
        self.version = version
        self.console_config = config if config is not None else ConsoleConfig.from_env()
        self.operator_client = client if client is not None else OperatorClient(self.console_config)
        if notification_timeout is None:
            self.notification_channel = NotificationChannel()
        else:
            self.notification_channel = NotificationChannel(timeout=notification_timeout)
        self.operator_store = OperatorStore(self.operator_client, self.notification_channel)
        self.sync_controller = SyncController(
            self.operator_store, self.operator_client, self.notification_channel
        )
        self._unsubscribers: list = []

    def compose(self) -> ComposeResult:
        log.info(f"compose() called, api={self.console_config.api_base_url}")
        yield from compose_operators_view()
        yield NotificationBar(self.notification_channel.dismiss, id=ids.NOTIFICATION_BAR)
        yield Horizontal(
            Static("", id=ids.STATUS_BAR),
            id=ids.FOOTER_CONTAINER,
        )
        yield Footer()

    # =========================================================================
    # Status and rendering
    # =========================================================================

    def _query_main(self, selector: str, expect_type: type) -> Any:
        """Query the operators screen, even while a modal is on top.

        App.query_one() only searches the active screen, so renders triggered
        while the editor is open would otherwise miss these widgets.

        Raises:
            NoMatches: If the widget is not mounted
        """
        if not self.screen_stack:
            raise NoMatches(f"No screen mounted for {selector}")
        return self.screen_stack[0].query_one(selector, expect_type)

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self._query_main(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def _render_operators(self) -> None:
        """Redraw the table from the store's canonical list."""
        store = self.operator_store
        try:
            table = self._query_main(css(ids.OPERATOR_TABLE), OperatorTable)
            hint = self._query_main(css(ids.EMPTY_HINT), Static)
        except NoMatches:
            log.debug("Operator table not mounted")
            return
        table.show_operators(store.operators)
        if store.operators:
            hint.add_class("hidden")
        else:
            hint.remove_class("hidden")
        if store.loading:
            self._set_status("Loading operators...")
        else:
            self._set_status(f"{len(store.operators)} operator(s) - {self.console_config.api_base_url}")

    def _render_notification(self, notification: Notification | None) -> None:
        try:
            bar = self._query_main(css(ids.NOTIFICATION_BAR), NotificationBar)
        except NoMatches:
            return
        bar.show_notification(notification)

    # =========================================================================
    # Mixin Handler Forwarding
    # =========================================================================
    # Textual's @on decorator only registers handlers defined on the class itself,
    # not on mixins. These forwarding handlers ensure events are routed to mixins.

    @on(Button.Pressed, css(ids.ADD_OPERATOR_BTN))
    def _on_add_operator_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_add_operator_pressed(event)

    @on(Button.Pressed, css(ids.REFRESH_BTN))
    def _on_refresh_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_refresh_pressed(event)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Subscribe the view to state and fetch the initial list."""
        self._unsubscribers = [
            self.operator_store.subscribe(self._render_operators),
            self.notification_channel.subscribe(self._render_notification),
        ]
        self._render_operators()
        self.query_one(css(ids.OPERATOR_TABLE), OperatorTable).focus()
        self.run_worker(self.operator_store.load_all(), group="operator-loads")

    async def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        await self.operator_client.aclose()
