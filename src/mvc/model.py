"""Model contract: a fixed table of named event handlers plus an async data snapshot.

Handlers mutate (or query) the model's private state synchronously. Rendering is
never triggered from here; the controller decides when to fetch and re-render.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from mvc.errors import HandlerNotFoundError
from mvc.event_map import EventMapT, check_handler_table

log = logging.getLogger(__name__)

DataT = TypeVar("DataT")
DataT_co = TypeVar("DataT_co", covariant=True)


@runtime_checkable
class Model(Protocol[DataT_co]):
    """Anything a controller can dispatch events to and fetch data from."""

    def handle(self, event: str, *params: Any) -> Any:
        """Invoke the handler registered for ``event`` and return its result."""
        ...

    async def fetch_data(self) -> DataT_co:
        """Return the current data snapshot without mutating state."""
        ...


class HandlerTable(Generic[EventMapT]):
    """Immutable event name -> handler table with fail-fast lookup.

    Embeddable in any model implementation; ``BaseModel`` is one such user.
    """

    def __init__(self, handlers: EventMapT, event_map: type | None = None) -> None:
        if event_map is not None:
            check_handler_table(event_map, handlers)
        self._handlers = MappingProxyType(dict(handlers))

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def __contains__(self, event: object) -> bool:
        return event in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def invoke(self, event: str, *params: Any) -> Any:
        """Call the handler for ``event`` with ``params``.

        Raises:
            HandlerNotFoundError: If no handler is registered for ``event``.
        """
        try:
            handler = self._handlers[event]
        except KeyError:
            raise HandlerNotFoundError(event, self.names) from None
        return handler(*params)


class BaseModel(ABC, Generic[DataT, EventMapT]):
    """Model base class holding a fixed handler table.

    Subclasses pass their handlers (usually closures over private state) to
    ``__init__`` and implement ``fetch_data``. Setting ``event_map`` to the
    TypedDict describing the handlers validates the table at construction.
    """

    event_map: ClassVar[type | None] = None

    def __init__(self, handlers: EventMapT) -> None:
        self._table: HandlerTable[EventMapT] = HandlerTable(handlers, self.event_map)

    @property
    def events(self) -> frozenset[str]:
        """Names of all events this model handles."""
        return self._table.names

    def handles(self, event: str) -> bool:
        return event in self._table

    def handle(self, event: str, *params: Any) -> Any:
        log.debug("%s handling %r %r", type(self).__name__, event, params)
        return self._table.invoke(event, *params)

    @abstractmethod
    async def fetch_data(self) -> DataT:
        """Return the current data snapshot.

        Any suspension (I/O, cache lookups) belongs inside the override.
        """
        ...
