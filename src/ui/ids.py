"""Widget ID and class constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


def cls(class_name: str) -> str:
    """Return a CSS selector for a widget class.

    Rendered nodes can appear more than once on screen, so their parts are
    addressed by class rather than by ID.
    """
    return f".{class_name}"


# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
MAIN_CONTENT = "main-content"
STATUS_BAR = "status-bar"

# Todo list node classes
TODO_LIST = "todo-list"
TODO_FORM = "todo-form"
TODO_INPUT = "todo-input"
ADD_BTN = "add-btn"
CLEAR_BTN = "clear-btn"
TODO_ITEMS = "todo-items"
TODO_SUMMARY = "todo-summary"

# Todo item node classes
TODO_ITEM = "todo-item"
DONE_BOX = "done-box"
TODO_NAME = "todo-name"
TODO_DESCRIPTION = "todo-description"
REMOVE_BTN = "remove-btn"
