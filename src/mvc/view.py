"""View contract: pure rendering plus a mutable table of interaction callbacks.

Callbacks can be (re)registered at any time, including after a node has been
rendered. Interaction code inside a rendered node must therefore look the
callback up when the interaction fires. ``emit`` and ``relay`` do that lookup;
holding on to the result of ``callback()`` does not.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from mvc.event_map import EventMapT, check_callback

log = logging.getLogger(__name__)

DataT = TypeVar("DataT")
NodeT = TypeVar("NodeT")
DataT_contra = TypeVar("DataT_contra", contravariant=True)
NodeT_co = TypeVar("NodeT_co", covariant=True)

Callback = Callable[..., Any]


@runtime_checkable
class View(Protocol[DataT_contra, NodeT_co]):
    """Anything a controller can subscribe to and render."""

    def on_event(self, event: str, callback: Callback) -> None:
        """Register ``callback`` for ``event``, replacing any previous one."""
        ...

    def render(self, data: DataT_contra) -> NodeT_co:
        """Build a UI node from ``data``."""
        ...


def _noop(*params: Any, **kwargs: Any) -> None:
    return None


class CallbackRegistry:
    """Partial, re-bindable event name -> callback table.

    Lookups of unregistered events never fail; they resolve to a no-op.
    """

    def __init__(self) -> None:
        self._callbacks: dict[str, Callback] = {}

    def register(self, event: str, callback: Callback) -> None:
        self._callbacks[event] = callback

    def registered(self, event: str) -> bool:
        return event in self._callbacks

    def lookup(self, event: str) -> Callback:
        callback = self._callbacks.get(event)
        if callback is None:
            log.debug("No callback registered for %r, using no-op", event)
            return _noop
        return callback

    def emit(self, event: str, *params: Any) -> Any:
        """Invoke whichever callback is registered for ``event`` right now."""
        return self.lookup(event)(*params)

    def relay(self, event: str) -> Callback:
        """Return a stable callable that emits ``event`` on every call.

        Safe to hand to widgets at render time: the registry is consulted each
        time the relay fires, so later ``register`` calls take effect.
        """

        def relayed(*params: Any) -> Any:
            return self.emit(event, *params)

        relayed.__name__ = f"relay_{event}"
        return relayed


class BaseView(ABC, Generic[DataT, NodeT, EventMapT]):
    """View base class embedding a ``CallbackRegistry``.

    Subclasses implement ``render``; interaction handlers in the nodes they
    build call ``self.emit(...)`` (or use ``self.relay(...)``). Setting
    ``event_map`` to the TypedDict of the view's events makes ``on_event``
    reject undeclared names and callbacks of the wrong arity. Emitting stays
    lenient: anything unregistered resolves to a no-op.
    """

    event_map: ClassVar[type | None] = None

    def __init__(self) -> None:
        self._callbacks = CallbackRegistry()

    def on_event(self, event: str, callback: Callback) -> None:
        if self.event_map is not None:
            check_callback(self.event_map, event, callback)
        log.debug("%s: callback for %r set to %s", type(self).__name__, event,
                  getattr(callback, "__name__", repr(callback)))
        self._callbacks.register(event, callback)

    def registered(self, event: str) -> bool:
        return self._callbacks.registered(event)

    def callback(self, event: str) -> Callback:
        """The callback currently registered for ``event`` (no-op if none)."""
        return self._callbacks.lookup(event)

    def emit(self, event: str, *params: Any) -> Any:
        return self._callbacks.emit(event, *params)

    def relay(self, event: str) -> Callback:
        return self._callbacks.relay(event)

    @abstractmethod
    def render(self, data: DataT) -> NodeT:
        """Build a UI node from ``data``. Must not touch registered callbacks."""
        ...
