"""Shared fixtures for typed-mvc tests."""

from dataclasses import dataclass
from typing import Any, Callable, TypedDict

import pytest

from mvc import BaseController, BaseModel, BaseView
from todo import TodoItemView, TodoListController, TodoListModel, TodoListView


class CounterEvents(TypedDict):
    increment: Callable[[int], int]
    reset: Callable[[], None]


class CounterModel(BaseModel[int, CounterEvents]):
    """Integer counter; ``increment`` returns the new value."""

    event_map = CounterEvents

    def __init__(self) -> None:
        self.count = 0
        self.fetches = 0
        super().__init__({"increment": self._increment, "reset": self._reset})

    def _increment(self, by: int) -> int:
        self.count += by
        return self.count

    def _reset(self) -> None:
        self.count = 0

    async def fetch_data(self) -> int:
        self.fetches += 1
        return self.count


@dataclass
class CounterNode:
    """Stand-in for a UI node: some text plus an interaction hook."""

    text: str
    click: Callable[..., Any]


class CounterViewEvents(TypedDict):
    increment: Callable[[int], None]
    reset: Callable[[], None]


class CounterView(BaseView[int, CounterNode, CounterViewEvents]):
    event_map = CounterViewEvents

    def render(self, data: int) -> CounterNode:
        return CounterNode(text=f"count={data}", click=self.relay("increment"))


class CounterController(BaseController[int, CounterNode]):
    def __init__(self, model, view, **kwargs) -> None:
        super().__init__(model, view, **kwargs)
        self.delegate("increment")
        self.delegate("reset")

    def start(self) -> None:
        self.push(self.view.render(0))


@pytest.fixture
def counter_model():
    return CounterModel()


@pytest.fixture
def counter_view():
    return CounterView()


@pytest.fixture
def counter_controller(counter_model, counter_view):
    return CounterController(counter_model, counter_view)


@pytest.fixture
def rendered():
    """A list-backed render sink: ``controller.on_update(rendered.append)``."""
    return []


@pytest.fixture
def todo_model():
    return TodoListModel()


@pytest.fixture
def todo_view():
    return TodoListView(TodoItemView())


@pytest.fixture
def todo_controller(todo_model, todo_view):
    return TodoListController(todo_model, todo_view)
