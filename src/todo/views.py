"""Todo views: build Textual widgets from todo data."""

from __future__ import annotations

from typing import Callable, TypedDict

from textual.widget import Widget

from mvc import BaseView, View
from todo.item import TodoItem
from ui.nodes import TodoItemNode, TodoListNode


class TodoItemViewEvents(TypedDict):
    remove: Callable[[int], None]
    toggle: Callable[[int], None]


class TodoListViewEvents(TypedDict):
    add: Callable[[str], None]
    remove: Callable[[int], None]
    toggle: Callable[[int], None]
    clear: Callable[[], None]


class TodoItemView(BaseView[TodoItem, TodoItemNode, TodoItemViewEvents]):
    """Renders one todo item as a row with a done checkbox and a remove button."""

    event_map = TodoItemViewEvents

    def render(self, data: TodoItem) -> TodoItemNode:
        return TodoItemNode(data, on_remove=self.relay("remove"), on_toggle=self.relay("toggle"))


class TodoListView(BaseView[list[TodoItem], TodoListNode, TodoListViewEvents]):
    """Renders the input form and one row per item via the item view.

    Item events are forwarded to this view's own callbacks, so whoever
    subscribes to the list view also hears removals and toggles.
    """

    event_map = TodoListViewEvents

    def __init__(self, item_view: View[TodoItem, Widget]) -> None:
        super().__init__()
        self._item_view = item_view
        self._item_view.on_event("remove", self.relay("remove"))
        self._item_view.on_event("toggle", self.relay("toggle"))

    def render(self, data: list[TodoItem]) -> TodoListNode:
        return TodoListNode(
            items=tuple(data),
            item_nodes=[self._item_view.render(item) for item in data],
            on_add=self.relay("add"),
            on_clear=self.relay("clear"),
        )
