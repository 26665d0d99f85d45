"""Todo item model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TodoItem:
    """A single entry in the todo list."""

    id: int
    name: str
    description: str = "Default"
    completed: bool = False

    def __str__(self) -> str:
        mark = "x" if self.completed else " "
        return f"[{mark}] {self.name} (#{self.id})"
