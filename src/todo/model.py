"""In-memory todo list model."""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Iterable, TypedDict

from mvc import BaseModel
from todo.item import TodoItem

log = logging.getLogger(__name__)


class TodoListModelEvents(TypedDict):
    add: Callable[[str], None]
    remove: Callable[[int], None]
    toggle: Callable[[int], None]
    clear: Callable[[], None]


class TodoListModel(BaseModel[list[TodoItem], TodoListModelEvents]):
    """Ordered todo list with sequential ids starting at 0.

    Ids are never reused, even after ``remove`` or ``clear``.
    """

    event_map = TodoListModelEvents

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._last_id = 0
        self._todos: list[TodoItem] = []
        super().__init__({
            "add": self._add,
            "remove": self._remove,
            "toggle": self._toggle,
            "clear": self._clear,
        })
        for name in initial:
            self._add(name)

    def _add(self, name: str) -> None:
        item = TodoItem(id=self._last_id, name=name)
        self._last_id += 1
        self._todos.append(item)
        log.info("Added %s", item)

    def _remove(self, item_id: int) -> None:
        self._todos = [todo for todo in self._todos if todo.id != item_id]

    def _toggle(self, item_id: int) -> None:
        self._todos = [
            dataclasses.replace(todo, completed=not todo.completed) if todo.id == item_id else todo
            for todo in self._todos
        ]

    def _clear(self) -> None:
        self._todos = []

    async def fetch_data(self) -> list[TodoItem]:
        return list(self._todos)
