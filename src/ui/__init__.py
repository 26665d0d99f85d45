"""UI module containing the widgets rendered by the todo views."""

from ui.nodes import TodoItemNode, TodoListNode
from ui import ids

__all__ = [
    "TodoItemNode",
    "TodoListNode",
    "ids",
]
