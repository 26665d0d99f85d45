"""Reference todo list built on the MVC core."""

from todo.item import TodoItem
from todo.model import TodoListModel, TodoListModelEvents
from todo.views import TodoItemView, TodoItemViewEvents, TodoListView, TodoListViewEvents
from todo.controller import TodoListController

__all__ = [
    "TodoItem",
    "TodoListModel",
    "TodoListModelEvents",
    "TodoItemView",
    "TodoItemViewEvents",
    "TodoListView",
    "TodoListViewEvents",
    "TodoListController",
]
