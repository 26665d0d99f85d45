"""Todo list controller."""

from __future__ import annotations

import asyncio

from textual.widget import Widget

from mvc import BaseController, Model, View
from todo.item import TodoItem

# View events forwarded one-to-one to model events of the same name
FORWARDED_EVENTS = ("add", "remove", "toggle", "clear")


class TodoListController(BaseController[list[TodoItem], Widget]):
    """Every forwarded view event mutates the model, then re-fetches and re-renders."""

    def __init__(
        self,
        model: Model[list[TodoItem]],
        view: View[list[TodoItem], Widget],
        *,
        drop_stale_renders: bool = True,
    ) -> None:
        super().__init__(model, view, drop_stale_renders=drop_stale_renders)
        for event in FORWARDED_EVENTS:
            self.delegate(event)

    def start(self) -> None:
        # Show an empty list right away, then whatever the model already holds.
        # The refresh needs a running loop, so check before pushing anything.
        asyncio.get_running_loop()
        self.push(self.view.render([]))
        self.schedule(self.refresh())
