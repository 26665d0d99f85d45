"""Todo widgets: the UI nodes produced by the todo views.

Widgets receive their interaction callbacks at construction. Views hand them
relays, which look up the currently registered callback on every call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import Button, Checkbox, Input, Label

from ui.ids import cls
import ui.ids as ids

if TYPE_CHECKING:
    from todo.item import TodoItem


class TodoItemNode(Horizontal):
    """A row representing one todo item."""

    DEFAULT_CSS = """
    TodoItemNode {
        height: auto;
    }
    TodoItemNode .todo-name {
        width: 1fr;
        padding: 1 1 0 1;
    }
    TodoItemNode .todo-description {
        width: 1fr;
        padding: 1 1 0 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        item: TodoItem,
        on_remove: Callable[[int], None],
        on_toggle: Callable[[int], None],
    ) -> None:
        super().__init__(classes=ids.TODO_ITEM)
        self.item = item
        self._on_remove = on_remove
        self._on_toggle = on_toggle

    def compose(self) -> ComposeResult:
        yield Checkbox("", self.item.completed, classes=ids.DONE_BOX)
        yield Label(self.item.name, markup=False, classes=ids.TODO_NAME)
        yield Label(self.item.description, markup=False, classes=ids.TODO_DESCRIPTION)
        yield Button("Remove", classes=ids.REMOVE_BTN, variant="error")

    @on(Button.Pressed, cls(ids.REMOVE_BTN))
    def on_remove_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_remove(self.item.id)

    @on(Checkbox.Changed, cls(ids.DONE_BOX))
    def on_done_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        if event.value != self.item.completed:
            self._on_toggle(self.item.id)


class TodoListNode(Vertical):
    """Input form, item rows and a summary line."""

    DEFAULT_CSS = """
    TodoListNode {
        height: 1fr;
    }
    TodoListNode .todo-form {
        height: auto;
    }
    TodoListNode .todo-input {
        width: 1fr;
    }
    TodoListNode .todo-summary {
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        items: Sequence[TodoItem],
        item_nodes: list[Widget],
        on_add: Callable[[str], None],
        on_clear: Callable[[], None],
    ) -> None:
        super().__init__(classes=ids.TODO_LIST)
        self.items = tuple(items)
        self._item_nodes = item_nodes
        self._on_add = on_add
        self._on_clear = on_clear

    @property
    def summary(self) -> str:
        done = sum(1 for item in self.items if item.completed)
        noun = "item" if len(self.items) == 1 else "items"
        return f"{len(self.items)} {noun}, {done} done"

    def compose(self) -> ComposeResult:
        with Horizontal(classes=ids.TODO_FORM):
            yield Input(placeholder="Enter a new task", classes=ids.TODO_INPUT)
            yield Button("Add", classes=ids.ADD_BTN, variant="primary")
            yield Button("Clear", classes=ids.CLEAR_BTN, variant="warning")
        with VerticalScroll(classes=ids.TODO_ITEMS):
            yield from self._item_nodes
        yield Label(self.summary, classes=ids.TODO_SUMMARY)

    @on(Button.Pressed, cls(ids.ADD_BTN))
    def on_add_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._submit()

    @on(Input.Submitted, cls(ids.TODO_INPUT))
    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    @on(Button.Pressed, cls(ids.CLEAR_BTN))
    def on_clear_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_clear()

    def _submit(self) -> None:
        """Emit the typed name (blank input is ignored)."""
        todo_input = self.query_one(cls(ids.TODO_INPUT), Input)
        name = todo_input.value.strip()
        if not name:
            return
        todo_input.value = ""
        self._on_add(name)
