"""Main TUI application: hosts a controller and mounts the nodes it pushes."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Label, Static

from config import AppConfig
from mvc import BaseController, Controller
from todo import TodoItemView, TodoListController, TodoListModel, TodoListView
from ui.ids import css
import ui.ids as ids

log = logging.getLogger(__name__)

APP_CSS = """
#header-container {
    height: 1;
    background: $primary;
}
#header-title {
    padding: 0 1;
    text-style: bold;
}
#main-content {
    height: 1fr;
}
#status-bar {
    height: 1;
    padding: 0 1;
    background: $panel;
}
"""


def build_controller(config: AppConfig) -> TodoListController:
    """Instantiate the todo model, views and controller."""
    model = TodoListModel(config.initial_items)
    view = TodoListView(TodoItemView())
    return TodoListController(model, view, drop_stale_renders=config.drop_stale_renders)


class TodoApp(App):
    """Host for a controller producing Textual widgets.

    Each node pushed by the controller replaces the one currently mounted.
    """

    TITLE = "Todo MVC"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: AppConfig | None = None,
        controller: Controller[Widget] | None = None,
    ) -> None:
        super().__init__()
        self.config = config or AppConfig()
        self.controller = controller or build_controller(self.config)
        self.nodes_mounted = 0
        self.status_message = ""

    def compose(self) -> ComposeResult:
        yield Horizontal(
            Label(self.config.title, id=ids.HEADER_TITLE),
            id=ids.HEADER_CONTAINER,
        )
        yield Container(id=ids.MAIN_CONTENT)
        yield Static("", markup=False, id=ids.STATUS_BAR)

    def on_mount(self) -> None:
        self.controller.on_update(self._show_node)
        if isinstance(self.controller, BaseController):
            self.controller.on_error(self._on_controller_error)
        log.info("Starting %s", type(self.controller).__name__)
        self.controller.run()

    # =========================================================================
    # Render sink
    # =========================================================================

    def _show_node(self, node: Widget) -> None:
        """Queue the node for mounting; pushes are applied in arrival order."""
        self.call_later(self._replace_node, node)

    async def _replace_node(self, node: Widget) -> None:
        try:
            main = self.query_one(css(ids.MAIN_CONTENT), Container)
        except NoMatches:
            log.debug("Main content not found, dropping node")
            return
        await main.remove_children()
        await main.mount(node)
        self.nodes_mounted += 1

    # =========================================================================
    # Status
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        self.status_message = message
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def _on_controller_error(self, exc: BaseException) -> None:
        log.error("Controller failure: %r", exc)
        self._set_status(f"Error: {exc}")
        self.notify(str(exc), title="Refresh failed", severity="error")
